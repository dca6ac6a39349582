"""Scan a game install for the entries backing each view kind.

Input order is whatever the OS directory listing returns; nothing is sorted.

Failure policy:
  - The kind's root directory missing or unreadable is a hard error
    (RootNotFoundError / RootNotReadableError).
  - A single mod directory with a bad ``mod.json`` is skipped. Skips are
    reported to an optional ``on_skip`` hook and the debug log only.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Protocol, assert_never

from northstar_mods.engine.browse_config import BrowseConfig
from northstar_mods.errors import ModParseError, RootNotFoundError, RootNotReadableError
from northstar_mods.models.constants import ViewKind
from northstar_mods.models.entries import ModEntry, PluginEntry
from northstar_mods.parser.mod_parser import parse_mod_dir


logger = logging.getLogger(__name__)

SkipHook = Callable[[Path, ModParseError], None]
Collection = list[ModEntry] | list[PluginEntry]


class Discovery(Protocol):
    """Anything that can (re)build the collection for a view kind."""

    def discover(self, root: Path, kind: ViewKind) -> Collection: ...


def resolve_root(game_path: Path, subpath: Iterable[str]) -> Path:
    """Canonicalize ``game_path/subpath`` and check it is a directory."""
    path = game_path.joinpath(*subpath)
    try:
        resolved = path.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise RootNotFoundError(path, "Directory not found") from exc
    except OSError as exc:
        raise RootNotReadableError(path, f"Cannot open directory ({exc.strerror or exc})") from exc
    if not resolved.is_dir():
        raise RootNotFoundError(path, "Not a directory")
    return resolved


def list_children(root: Path) -> list[Path]:
    """Immediate children of ``root`` in listing order."""
    try:
        return list(root.iterdir())
    except FileNotFoundError as exc:
        raise RootNotFoundError(root, "Directory not found") from exc
    except OSError as exc:
        raise RootNotReadableError(root, f"Cannot list directory ({exc.strerror or exc})") from exc


def find_mod_dirs(mods_root: Path) -> list[Path]:
    return [child for child in list_children(mods_root) if child.is_dir()]


def discover_mods(
    game_path: Path,
    subpath: Iterable[str] = BrowseConfig().mods_subpath,
    on_skip: SkipHook | None = None,
) -> list[ModEntry]:
    """Parse every mod directory; bad ones are left out of the result."""
    mods_root = resolve_root(game_path, subpath)
    mods: list[ModEntry] = []
    for mod_dir in find_mod_dirs(mods_root):
        try:
            mods.append(parse_mod_dir(mod_dir))
        except ModParseError as exc:
            logger.debug("Skipping mod directory %s: %s", mod_dir, exc.reason)
            if on_skip is not None:
                on_skip(mod_dir, exc)
    return mods


def is_plugin_file(path: Path, extension: str) -> bool:
    # Case-sensitive: "Foo.DLL" is not picked up.
    return path.is_file() and path.suffix == f".{extension}"


def discover_plugins(
    game_path: Path,
    subpath: Iterable[str] = BrowseConfig().plugins_subpath,
    extension: str = BrowseConfig().plugin_extension,
) -> list[PluginEntry]:
    plugins_root = resolve_root(game_path, subpath)
    return [
        PluginEntry(name=child.name)
        for child in list_children(plugins_root)
        if is_plugin_file(child, extension)
    ]


@dataclass(slots=True)
class FilesystemDiscovery:
    """Synchronous on-disk discovery, run on the caller's thread."""

    config: BrowseConfig = BrowseConfig()
    on_skip: SkipHook | None = None

    def discover(self, root: Path, kind: ViewKind) -> Collection:
        if kind is ViewKind.MODS:
            return discover_mods(root, self.config.mods_subpath, self.on_skip)
        if kind is ViewKind.PLUGINS:
            return discover_plugins(
                root, self.config.plugins_subpath, self.config.plugin_extension
            )
        if kind is ViewKind.PACKAGES or kind is ViewKind.PLACEHOLDER:
            return []
        assert_never(kind)

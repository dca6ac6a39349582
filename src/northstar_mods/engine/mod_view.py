"""Tagged-union view over the collection backing the active kind.

This module contains no GUI code. Titles and cell text are returned as plain
data (``StyledText``) that any UI toolkit can render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import ClassVar, Literal, assert_never

from northstar_mods.engine.browse_config import BrowseConfig
from northstar_mods.models.constants import PACKAGES_TITLE, PLACEHOLDER_TITLE, ViewKind
from northstar_mods.models.entries import ModEntry, PluginEntry
from northstar_mods.parser.discovery import Discovery, FilesystemDiscovery


logger = logging.getLogger(__name__)

SpanStyle = Literal["plain", "accent"]


@dataclass(frozen=True, slots=True)
class TextSpan:
    text: str
    style: SpanStyle = "plain"


StyledText = tuple[tuple[TextSpan, ...], ...]


@dataclass(slots=True)
class ModsView:
    kind: ClassVar[ViewKind] = ViewKind.MODS
    entries: list[ModEntry] = field(default_factory=list)


@dataclass(slots=True)
class PluginsView:
    kind: ClassVar[ViewKind] = ViewKind.PLUGINS
    entries: list[PluginEntry] = field(default_factory=list)


@dataclass(slots=True)
class PackagesView:
    """Packages have no backing entries yet but still render a blank title."""
    kind: ClassVar[ViewKind] = ViewKind.PACKAGES


@dataclass(slots=True)
class PlaceholderView:
    """Fixed-size placeholder used only to drive the grid layout."""
    kind: ClassVar[ViewKind] = ViewKind.PLACEHOLDER


ViewVariant = ModsView | PluginsView | PackagesView | PlaceholderView


def empty_variant(kind: ViewKind) -> ViewVariant:
    if kind is ViewKind.MODS:
        return ModsView()
    if kind is ViewKind.PLUGINS:
        return PluginsView()
    if kind is ViewKind.PACKAGES:
        return PackagesView()
    if kind is ViewKind.PLACEHOLDER:
        return PlaceholderView()
    assert_never(kind)


def _get(entries: list, index: int):
    if index < 0 or index >= len(entries):
        return None
    return entries[index]


class ModView:
    """Owns the live collection for exactly one view kind.

    Every kind change goes through ``switch``; ``reload`` then repopulates
    the new (empty) collection from disk.
    """

    __slots__ = ("_variant", "_discovery", "_config")

    def __init__(
        self,
        discovery: Discovery | None = None,
        config: BrowseConfig | None = None,
    ) -> None:
        self._config = config or BrowseConfig()
        self._discovery: Discovery = discovery or FilesystemDiscovery(self._config)
        self._variant: ViewVariant = ModsView()

    @property
    def kind(self) -> ViewKind:
        return self._variant.kind

    @property
    def variant(self) -> ViewVariant:
        return self._variant

    @property
    def entries(self) -> list[ModEntry] | list[PluginEntry]:
        """Copy of the live entries; empty for kinds without entries."""
        variant = self._variant
        if isinstance(variant, (ModsView, PluginsView)):
            return list(variant.entries)
        if isinstance(variant, (PackagesView, PlaceholderView)):
            return []
        assert_never(variant)

    def reload(self, game_path: Path) -> None:
        """Replace the live collection with a fresh scan.

        On failure the DiscoveryError propagates and the current collection
        is left as it was.
        """
        variant = self._variant
        if isinstance(variant, ModsView):
            logger.info("Reloading mods from %s", game_path)
            variant.entries = list(self._discovery.discover(game_path, ViewKind.MODS))
            logger.debug("Loaded %d mod(s)", len(variant.entries))
        elif isinstance(variant, PluginsView):
            logger.info("Reloading plugins from %s", game_path)
            variant.entries = list(self._discovery.discover(game_path, ViewKind.PLUGINS))
            logger.debug("Loaded %d plugin(s)", len(variant.entries))
        elif isinstance(variant, (PackagesView, PlaceholderView)):
            return
        else:
            assert_never(variant)

    def filter(self, keyword: str) -> None:
        """Keep entries whose display name contains ``keyword`` (case-sensitive)."""
        variant = self._variant
        if isinstance(variant, (ModsView, PluginsView)):
            variant.entries[:] = [e for e in variant.entries if keyword in e.display_name]
        elif isinstance(variant, (PackagesView, PlaceholderView)):
            return
        else:
            assert_never(variant)

    def switch(self, kind_index: int) -> ModView:
        """Make an empty collection of the requested kind live.

        Does not scan; call ``reload`` afterwards. An invalid index falls back
        to MODS instead of raising.
        """
        try:
            kind = ViewKind.from_index(kind_index)
        except ValueError:
            logger.warning("Got invalid view index of %r, falling back to Mods", kind_index)
            kind = ViewKind.MODS
        self._variant = empty_variant(kind)
        return self

    def count(self) -> int:
        variant = self._variant
        if isinstance(variant, (ModsView, PluginsView)):
            return len(variant.entries)
        if isinstance(variant, PackagesView):
            return 0
        if isinstance(variant, PlaceholderView):
            return self._config.placeholder_count
        assert_never(variant)

    def __len__(self) -> int:
        return self.count()

    def title_at(self, index: int) -> str | None:
        variant = self._variant
        if isinstance(variant, (ModsView, PluginsView)):
            entry = _get(variant.entries, index)
            return None if entry is None else entry.display_name
        if isinstance(variant, PackagesView):
            return PACKAGES_TITLE
        if isinstance(variant, PlaceholderView):
            return PLACEHOLDER_TITLE
        assert_never(variant)

    def render_text_at(self, index: int) -> StyledText | None:
        """Cell body for ``index``; None means the caller draws an EMPTY cell."""
        variant = self._variant
        if isinstance(variant, ModsView):
            mod = _get(variant.entries, index)
            if mod is None:
                return None
            priority = mod.mod_json.load_priority
            if priority is None:
                priority = self._config.default_load_priority
            return (
                (
                    TextSpan(mod.mod_json.version),
                    TextSpan("|"),
                    TextSpan(str(priority), "accent"),
                ),
                (TextSpan(mod.mod_json.description),),
            )
        if isinstance(variant, PluginsView):
            plugin = _get(variant.entries, index)
            if plugin is None:
                return None
            return ((TextSpan(plugin.name),),)
        if isinstance(variant, (PackagesView, PlaceholderView)):
            return None
        assert_never(variant)


def styled_text_to_plain(text: StyledText) -> str:
    """Flatten StyledText to newline-separated plain text."""
    return "\n".join("".join(span.text for span in line) for line in text)

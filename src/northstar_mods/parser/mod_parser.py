"""Parse a single installed mod directory into a ModEntry.

Layout of a mod directory:
    mod.json                 required, lenient JSON (comments, trailing commas)
    manifest.json            optional, Thunderstore package manifest
    thunderstore_author.txt  optional, plain-text author name

Only ``mod.json`` can make parsing fail. The optional files degrade to None.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import json5

from northstar_mods.errors import ModParseError
from northstar_mods.models.constants import AUTHOR_TXT, MANIFEST_JSON, MOD_JSON
from northstar_mods.models.entries import ModEntry, ModJson


logger = logging.getLogger(__name__)


def read_mod_json(path: Path) -> ModJson:
    """Read and validate a ``mod.json`` file.

    Raises OSError if the file can't be read, ValueError if it doesn't decode
    to a valid ModJson, RecursionError if it nests too deeply to decode.
    """
    text = path.read_text(encoding="utf-8-sig")
    return ModJson.from_dict(json5.loads(text))


def read_manifest(path: Path) -> dict[str, Any] | None:
    """Return the decoded manifest object, or None if missing or malformed."""
    try:
        data = json5.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def read_author(path: Path) -> str | None:
    """Return the whole author file as-is, or None if it can't be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, ValueError):
        return None


def parse_mod_dir(mod_dir: Path) -> ModEntry:
    """Build a ModEntry from a mod directory.

    Raises ModParseError when the required ``mod.json`` is unreadable or
    invalid. Missing optional files are not errors.
    """
    try:
        mod_json = read_mod_json(mod_dir / MOD_JSON)
    except OSError as exc:
        raise ModParseError(mod_dir, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        raise ModParseError(mod_dir, str(exc)) from exc
    except RecursionError as exc:
        raise ModParseError(mod_dir, "document nested too deeply") from exc

    entry = ModEntry(
        mod_json=mod_json,
        source_path=mod_dir,
        manifest=read_manifest(mod_dir / MANIFEST_JSON),
        author=read_author(mod_dir / AUTHOR_TXT),
    )
    logger.debug("Parsed mod %r from %s", entry.display_name, mod_dir)
    return entry

"""Installed mod and plugin data models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class ModJson:
    """Required metadata from a mod's ``mod.json``.

    Northstar writes PascalCase keys (``Name``, ``LoadPriority``); snake_case
    spellings are accepted too.
    """
    name: str
    version: str
    description: str
    load_priority: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "ModJson":
        """Validate a decoded ``mod.json`` document.

        Raises ValueError when the document is not an object or a required
        field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        name = _pick(data, "Name", "name")
        version = _pick(data, "Version", "version")
        description = _pick(data, "Description", "description")
        for key, value in (("name", name), ("version", version), ("description", description)):
            if not isinstance(value, str):
                raise ValueError(f"field {key!r} must be a string")

        load_priority = _pick(data, "LoadPriority", "load_priority")
        # bool is an int subclass; "LoadPriority": true is not a priority.
        if load_priority is not None and (
            isinstance(load_priority, bool) or not isinstance(load_priority, int)
        ):
            raise ValueError("field 'load_priority' must be an integer")
        return cls(
            name=name,
            version=version,
            description=description,
            load_priority=load_priority,
        )


def _pick(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(slots=True)
class ModEntry:
    """An installed mod directory under ``R2Northstar/mods``."""
    mod_json: ModJson
    source_path: Path
    manifest: dict[str, Any] | None = field(default=None)
    author: str | None = None

    @property
    def display_name(self) -> str:
        return self.mod_json.name


@dataclass(frozen=True, slots=True)
class PluginEntry:
    """A loadable plugin binary under ``R2Northstar/plugins``."""
    name: str

    @property
    def display_name(self) -> str:
        return self.name

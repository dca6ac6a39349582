"""View kinds and Northstar install layout constants.

Paths are relative to the Titanfall 2 install directory.
"""

from enum import IntEnum


class ViewKind(IntEnum):
    """Browsable collection kinds, in side-bar order."""
    MODS = 0
    PLUGINS = 1
    PACKAGES = 2
    PLACEHOLDER = 3    # "cta" tab, no backing entries

    @classmethod
    def from_index(cls, index: int) -> "ViewKind":
        """Bounds-checked conversion from a side-bar index.

        Raises ValueError for anything outside 0..3.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"View index must be an int, got {index!r}")
        if index < 0 or index >= len(cls):
            raise ValueError(f"Invalid view index {index}")
        return cls(index)

    @property
    def label(self) -> str:
        return VIEW_KIND_LABELS[self]

    def next(self) -> "ViewKind":
        """Following kind, wrapping from the last back to MODS."""
        return ViewKind((int(self) + 1) % len(ViewKind))


VIEW_KIND_LABELS: dict[ViewKind, str] = {
    ViewKind.MODS: "Mods",
    ViewKind.PLUGINS: "Plugins",
    ViewKind.PACKAGES: "Packages",
    ViewKind.PLACEHOLDER: "cta",
}

NORTHSTAR_DIR = "R2Northstar"
MODS_DIR = "mods"
PLUGINS_DIR = "plugins"

MOD_JSON = "mod.json"
MANIFEST_JSON = "manifest.json"
AUTHOR_TXT = "thunderstore_author.txt"

PLUGIN_EXTENSION = "dll"
DEFAULT_LOAD_PRIORITY = 999

PLACEHOLDER_TITLE = "CTA VIEW"
PLACEHOLDER_COUNT = 5
PACKAGES_TITLE = ""
EMPTY_CELL_TEXT = "EMPTY"

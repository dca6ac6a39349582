"""Configuration knobs for browsing installed content.

Defaults match a stock Northstar install and the 5x5 card grid.
"""

from dataclasses import dataclass
from math import isqrt

from northstar_mods.models.constants import (
    DEFAULT_LOAD_PRIORITY,
    MODS_DIR,
    NORTHSTAR_DIR,
    PLACEHOLDER_COUNT,
    PLUGIN_EXTENSION,
    PLUGINS_DIR,
)


@dataclass(frozen=True, slots=True)
class BrowseConfig:
    """Tuneable parameters for discovery, layout and error display."""

    page_capacity: int = 25                 # cells per page, a perfect square
    mods_subpath: tuple[str, ...] = (NORTHSTAR_DIR, MODS_DIR)
    plugins_subpath: tuple[str, ...] = (NORTHSTAR_DIR, PLUGINS_DIR)
    plugin_extension: str = PLUGIN_EXTENSION
    default_load_priority: int = DEFAULT_LOAD_PRIORITY
    placeholder_count: int = PLACEHOLDER_COUNT
    error_display_seconds: float = 2.0

    def __post_init__(self) -> None:
        if self.page_capacity <= 0 or isqrt(self.page_capacity) ** 2 != self.page_capacity:
            raise ValueError(
                f"page_capacity must be a positive perfect square, got {self.page_capacity}"
            )
        if self.error_display_seconds < 0:
            raise ValueError("error_display_seconds must be >= 0")

    @property
    def row_width(self) -> int:
        return isqrt(self.page_capacity)

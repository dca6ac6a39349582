"""Page offset and selection over a flat index space laid out as a square grid.

The grid is ``row_width`` x ``row_width`` cells. Paging moves by a whole page,
vertical moves by a row, horizontal moves by one cell. Selection is clamped to
the current page and may point at cells past the end of the collection (those
render as EMPTY).
"""

from dataclasses import dataclass
from math import isqrt


@dataclass(slots=True)
class PageCursor:
    """Current page offset and absolute selected index."""

    capacity: int = 25
    page_offset: int = 0
    selected_index: int = 0

    def __post_init__(self) -> None:
        if self.capacity <= 0 or isqrt(self.capacity) ** 2 != self.capacity:
            raise ValueError(f"Page capacity must be a positive perfect square, got {self.capacity}")

    @property
    def row_width(self) -> int:
        return isqrt(self.capacity)

    @property
    def position(self) -> tuple[int, int]:
        return self.page_offset, self.selected_index

    def reset(self) -> None:
        self.page_offset, self.selected_index = 0, 0

    def last_page_offset(self, count: int) -> int:
        """Offset of the last page holding at least one of ``count`` entries."""
        if count <= 0:
            return 0
        return (count - 1) // self.capacity * self.capacity

    def page_forward(self, count: int) -> None:
        if count <= 0:
            return
        self.page_offset = min(self.page_offset + self.capacity, self.last_page_offset(count))

    def page_back(self) -> None:
        self.page_offset = max(self.page_offset - self.capacity, 0)

    def move_left(self) -> None:
        self._step_back(1)

    def move_up(self) -> None:
        self._step_back(self.row_width)

    def move_right(self) -> None:
        self._step_forward(1)

    def move_down(self) -> None:
        self._step_forward(self.row_width)

    def _step_back(self, stride: int) -> None:
        self.selected_index = max(max(self.selected_index - stride, 0), self.page_offset)

    def _step_forward(self, stride: int) -> None:
        self.selected_index = min(
            self.selected_index + stride,
            self.page_offset + self.capacity - 1,
        )

    def is_selected(self, index: int) -> bool:
        return index == self.selected_index

    def visible_indices(self) -> list[list[int]]:
        """Absolute indices of the current page as rows of cells."""
        width = self.row_width
        return [
            [self.page_offset + row * width + column for column in range(width)]
            for row in range(width)
        ]

"""Controller for the mods page: kind switching, paging, selection, reload."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from northstar_mods.engine.mod_view import ModView, StyledText
from northstar_mods.engine.pagination import PageCursor
from northstar_mods.models.constants import ViewKind
from northstar_mods.ui.state import UiState


KEY_BINDINGS: tuple[tuple[str, str], ...] = (
    ("reload", "ctrl + r"),
    ("next", "n"),
    ("previous", "p"),
    ("select", "(↑/↓/→/←)/(h/j/k/l)"),
    ("type", "tab"),
)


@dataclass(frozen=True, slots=True)
class KeyPress:
    """Toolkit-neutral key event. ``key`` uses GDK key names ("n", "Left", "Tab")."""

    key: str
    ctrl: bool = False
    pressed: bool = True


@dataclass(frozen=True, slots=True)
class GridCell:
    """One visible slot of the page grid."""

    index: int
    row: int
    column: int
    title: str | None
    text: StyledText | None
    selected: bool

    @property
    def is_empty(self) -> bool:
        return self.text is None


@dataclass(slots=True)
class ModsController:
    """Owns the mod view, page cursor and the game path they are scanned from."""

    game_path: Path
    view: ModView = field(default_factory=ModView)
    cursor: PageCursor = field(default_factory=PageCursor)
    on_change: Callable[[], None] | None = None

    @property
    def kind(self) -> ViewKind:
        return self.view.kind

    def key_bindings(self) -> list[tuple[str, str]]:
        return list(KEY_BINDINGS)

    def on_focus(self) -> None:
        """Initial scan when the page is shown."""
        self.reload()

    def reload(self) -> None:
        try:
            self.view.reload(self.game_path)
        finally:
            self._notify_changed()

    def switch_kind(self, kind_index: int) -> ModView:
        """Reset paging and make an empty collection of the given kind live."""
        self.cursor.reset()
        return self.view.switch(kind_index)

    def cycle_kind(self) -> ViewKind:
        """Switch to the next kind (wrapping) and scan it.

        The switch sticks even if the following reload raises.
        """
        next_kind = self.view.kind.next()
        try:
            self.switch_kind(int(next_kind)).reload(self.game_path)
        finally:
            self._notify_changed()
        return self.view.kind

    def apply_filter(self, keyword: str) -> None:
        self.view.filter(keyword)
        self._notify_changed()

    def handle_input(self, event: KeyPress, state: UiState) -> None:
        """Apply one key press. Discovery errors from reloads propagate."""
        if not event.pressed or state.is_typing:
            return
        key = event.key
        if key in ("r", "R") and event.ctrl:
            self.reload()
            return
        if key == "Tab":
            self.cycle_kind()
            return

        if key == "n":
            self.cursor.page_forward(self.view.count())
        elif key == "p":
            self.cursor.page_back()
        elif key in ("h", "Left"):
            self.cursor.move_left()
        elif key in ("l", "Right"):
            self.cursor.move_right()
        elif key in ("j", "Down"):
            self.cursor.move_down()
        elif key in ("k", "Up"):
            self.cursor.move_up()
        else:
            return
        self._notify_changed()

    def count(self) -> int:
        return self.view.count()

    def kind_labels(self) -> list[tuple[str, bool]]:
        """Side-bar labels with a flag for the active kind."""
        return [(kind.label, kind is self.view.kind) for kind in ViewKind]

    def cells(self) -> list[GridCell]:
        cells: list[GridCell] = []
        for row, indices in enumerate(self.cursor.visible_indices()):
            for column, index in enumerate(indices):
                cells.append(
                    GridCell(
                        index=index,
                        row=row,
                        column=column,
                        title=self.view.title_at(index),
                        text=self.view.render_text_at(index),
                        selected=self.cursor.is_selected(index),
                    )
                )
        return cells

    def _notify_changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

"""Mods page view: kind side bar, entry count and the card grid."""

from collections.abc import Callable

from gi.repository import Gdk, GLib, Gtk

from northstar_mods.engine.mod_view import StyledText
from northstar_mods.errors import NorthstarModsError
from northstar_mods.models.constants import EMPTY_CELL_TEXT
from northstar_mods.ui.controllers.mods_controller import GridCell, KeyPress, ModsController
from northstar_mods.ui.state import UiState
from northstar_mods.ui.views.theme import ACCENT_GREEN


def styled_text_markup(text: StyledText) -> str:
    lines: list[str] = []
    for line in text:
        parts: list[str] = []
        for span in line:
            escaped = GLib.markup_escape_text(span.text)
            if span.style == "accent":
                escaped = f'<span foreground="{ACCENT_GREEN}">{escaped}</span>'
            parts.append(escaped)
        lines.append("".join(parts))
    return "\n".join(lines)


class ModsPage(Gtk.Box):
    """Grid browser for installed mods, plugins and packages."""

    def __init__(
        self,
        controller: ModsController,
        state: UiState,
        on_error: Callable[[NorthstarModsError], None],
    ) -> None:
        super().__init__(orientation=Gtk.Orientation.HORIZONTAL, spacing=0)
        self._controller = controller
        self._state = state
        self._on_error = on_error
        self.add_css_class("mods-page")
        self.set_hexpand(True)
        self.set_vexpand(True)

        side = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        side.set_size_request(110, -1)
        self.append(side)
        self._kind_labels: list[Gtk.Label] = []
        for label, _active in controller.kind_labels():
            kind_label = Gtk.Label(label=label)
            kind_label.add_css_class("kind-label")
            side.append(kind_label)
            self._kind_labels.append(kind_label)

        self._search = Gtk.SearchEntry()
        self._search.set_placeholder_text("Filter...")
        self._search.set_margin_top(12)
        self._search.connect("activate", self._on_filter_activated)
        self._search.connect("stop-search", self._on_filter_stopped)
        focus = Gtk.EventControllerFocus()
        focus.connect("enter", self._on_search_focus_changed, True)
        focus.connect("leave", self._on_search_focus_changed, False)
        self._search.add_controller(focus)
        side.append(self._search)

        self._count_frame = Gtk.Frame()
        self._count_frame.set_hexpand(True)
        self._count_frame.set_vexpand(True)
        self.append(self._count_frame)

        self._grid = Gtk.Grid()
        self._grid.set_row_homogeneous(True)
        self._grid.set_column_homogeneous(True)
        self._grid.set_row_spacing(4)
        self._grid.set_column_spacing(4)
        self._grid.set_margin_start(8)
        self._grid.set_margin_end(8)
        self._grid.set_margin_top(8)
        self._grid.set_margin_bottom(8)
        self._grid.set_focusable(True)
        self._count_frame.set_child(self._grid)

        controller.on_change = self.refresh
        self.refresh()

    def on_focus(self) -> None:
        self._run(self._controller.on_focus)

    def handle_key(self, keyval: int, modifiers: Gdk.ModifierType) -> bool:
        """Translate a GDK key press; True if the page consumed it."""
        if self._state.is_typing:
            return False
        name = Gdk.keyval_name(keyval)
        if name is None:
            return False
        event = KeyPress(key=name, ctrl=bool(modifiers & Gdk.ModifierType.CONTROL_MASK))
        self._run(lambda: self._controller.handle_input(event, self._state))
        return name in ("Tab", "Left", "Right", "Up", "Down")

    def refresh(self) -> None:
        for label_widget, (_label, active) in zip(self._kind_labels, self._controller.kind_labels()):
            if active:
                label_widget.add_css_class("active-kind")
            else:
                label_widget.remove_css_class("active-kind")
        self._count_frame.set_label(str(self._controller.count()))
        self._render_grid()

    def _render_grid(self) -> None:
        child = self._grid.get_first_child()
        while child is not None:
            next_child = child.get_next_sibling()
            self._grid.remove(child)
            child = next_child
        for cell in self._controller.cells():
            self._grid.attach(self._build_cell(cell), cell.column, cell.row, 1, 1)

    def _build_cell(self, cell: GridCell) -> Gtk.Widget:
        frame = Gtk.Frame()
        frame.add_css_class("mod-cell")
        if cell.selected:
            frame.add_css_class("selected-cell")
        body = Gtk.Label()
        body.set_wrap(True)
        body.set_justify(Gtk.Justification.CENTER)
        body.set_vexpand(True)
        if cell.text is None:
            body.set_text(EMPTY_CELL_TEXT)
        else:
            frame.set_label(cell.title or "UNK")
            body.add_css_class("mod-cell-body")
            body.set_markup(styled_text_markup(cell.text))
        frame.set_child(body)
        return frame

    def _run(self, action: Callable[[], None]) -> None:
        try:
            action()
        except NorthstarModsError as exc:
            self._on_error(exc)

    def _on_filter_activated(self, entry: Gtk.SearchEntry) -> None:
        keyword = entry.get_text()
        if keyword:
            self._controller.apply_filter(keyword)
        self._grid.grab_focus()

    def _on_filter_stopped(self, entry: Gtk.SearchEntry) -> None:
        entry.set_text("")
        self._grid.grab_focus()

    def _on_search_focus_changed(self, _controller: Gtk.EventControllerFocus, typing: bool) -> None:
        self._state.is_typing = typing

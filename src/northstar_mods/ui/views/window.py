"""Main application window."""

import time

from gi.repository import Adw, GLib, Gtk

from northstar_mods.errors import NorthstarModsError
from northstar_mods.ui.bootstrap import BrowseSession
from northstar_mods.ui.state import UiState
from northstar_mods.ui.views.mods_page import ModsPage


TICK_MS = 100
GLOBAL_BINDS: tuple[tuple[str, str], ...] = (("Quit", "q"),)


class MainWindow(Adw.ApplicationWindow):
    """Top-level window hosting the mods page, key legend and error banner."""

    def __init__(self, app: Adw.Application, state: UiState, session: BrowseSession) -> None:
        super().__init__(application=app, title=state.banner_title)
        self._state = state
        self._session = session

        self.set_default_size(1280, 800)

        toolbar_view = Adw.ToolbarView()
        self.set_content(toolbar_view)

        header = Adw.HeaderBar()
        title = Gtk.Label(label=f"{state.banner_title}  -  {session.game_path}")
        title.add_css_class("title-4")
        header.set_title_widget(title)
        toolbar_view.add_top_bar(header)

        body = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)
        toolbar_view.set_content(body)

        self._mods_page = ModsPage(session.controller, state, self._report_error)
        body.append(self._mods_page)

        legend = Gtk.Label(label=self._legend_text(), xalign=0)
        legend.add_css_class("key-legend")
        body.append(legend)

        self._error_label = Gtk.Label(xalign=0)
        self._error_label.add_css_class("error-banner")
        body.append(self._error_label)

        keys = Gtk.EventControllerKey()
        keys.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        keys.connect("key-pressed", self._on_key_pressed)
        self.add_controller(keys)

        GLib.timeout_add(TICK_MS, self._on_tick)
        self._mods_page.on_focus()

    def _legend_text(self) -> str:
        binds = list(GLOBAL_BINDS) + self._session.controller.key_bindings()
        return "  ".join(f"{desc} - {key}" for desc, key in binds)

    def _report_error(self, error: NorthstarModsError) -> None:
        self._state.report_error(error, time.time())
        self._error_label.set_text(self._state.error_text)

    def _on_tick(self) -> bool:
        if self._state.expire_error(time.time()):
            self._error_label.set_text("")
        return GLib.SOURCE_CONTINUE

    def _on_key_pressed(
        self,
        _controller: Gtk.EventControllerKey,
        keyval: int,
        _keycode: int,
        modifiers,
    ) -> bool:
        if not self._state.is_typing and keyval in (ord("q"), ord("Q")):
            self.close()
            return True
        return self._mods_page.handle_key(keyval, modifiers)

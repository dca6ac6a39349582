"""Colour palette and stylesheet for the mods page."""

from gi.repository import Gdk, Gtk


BACKGROUND = "#292929"
VGREY = "#454545"
VBLACK = "#181818"
SELECT = "#ebebeb"
ACCENT_GREEN = "#3fb950"
TITLE_RED = "#ff6b6b"
SELECTED_RED = "#e5484d"

STYLESHEET = f"""
.mods-page {{ background-color: {BACKGROUND}; }}
.kind-label {{ color: white; padding: 6px; }}
.kind-label.active-kind {{ color: {SELECTED_RED}; font-weight: bold; }}
.mod-cell {{ background-color: {BACKGROUND}; border: 1px solid {VGREY}; }}
.mod-cell > label {{ color: {TITLE_RED}; }}
.mod-cell.selected-cell {{ border-color: {SELECTED_RED}; }}
.mod-cell-body {{ color: {SELECT}; font-weight: bold; }}
.key-legend {{ background-color: {VBLACK}; color: {VGREY}; padding: 2px 6px; }}
.error-banner {{ color: {SELECTED_RED}; padding: 2px 6px; }}
"""


def install_stylesheet() -> None:
    """Register the stylesheet for the default display, once per process."""
    display = Gdk.Display.get_default()
    if display is None:
        return
    provider = Gtk.CssProvider()
    # load_from_string needs GTK 4.12
    provider.load_from_data(STYLESHEET, -1)
    Gtk.StyleContext.add_provider_for_display(
        display, provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )

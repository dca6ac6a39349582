"""GTK4 + Libadwaita application bootstrap."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

try:
    import gi
except ImportError as exc:  # pragma: no cover - import guard for missing system deps
    raise SystemExit(
        "PyGObject is required to run the UI. "
        "Install GTK4/Libadwaita bindings, then run `python -m northstar_mods.ui.app`."
    ) from exc

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio, Gtk

from northstar_mods.logging_config import DEFAULT_LOG_FILE, parse_level, setup_logging
from northstar_mods.ui.bootstrap import BrowseSession, bootstrap_default_session
from northstar_mods.ui.state import UiState
from northstar_mods.ui.views.theme import install_stylesheet
from northstar_mods.ui.views.window import MainWindow


APP_ID = "io.github.northstarmods.App"

logger = logging.getLogger(__name__)


class NorthstarModsApp(Adw.Application):
    """Application object and activation lifecycle."""

    def __init__(self, game_path: Path | None = None) -> None:
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)
        self._session: BrowseSession
        self._state: UiState
        self._session, self._state = bootstrap_default_session(game_path)

    def do_activate(self) -> None:  # type: ignore[override]
        window = self.props.active_window
        if window is None:
            install_stylesheet()
            try:
                window = MainWindow(self, self._state, self._session)
            except RuntimeError as exc:
                raise SystemExit(
                    "Gtk couldn't initialize a display. Run this app from a desktop session."
                ) from exc
        window.present()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse installed Northstar mods and plugins")
    parser.add_argument(
        "--game-path",
        type=Path,
        default=None,
        help="Titanfall 2 install directory (defaults to $NORTHSTAR_GAME_PATH or a known install)",
    )
    parser.add_argument("--log-file", type=Path, default=DEFAULT_LOG_FILE)
    parser.add_argument("--log-level", default="debug", help="debug, info, warning or error")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the desktop app."""
    args = build_arg_parser().parse_args(argv)
    try:
        level = parse_level(args.log_level)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    setup_logging(level=level, log_file=args.log_file)

    init_ok = Gtk.init_check()
    if isinstance(init_ok, tuple):
        init_ok = init_ok[0]
    if not init_ok:
        raise SystemExit(
            "Gtk display initialization failed. Run the UI inside a desktop session."
        )
    app = NorthstarModsApp(args.game_path)
    try:
        app.run([])
    except KeyboardInterrupt:
        # Allow Ctrl+C to terminate cleanly without a traceback.
        return
    finally:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()

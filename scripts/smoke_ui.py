"""Headless GTK smoke check for the northstar-mods browser.

Starts a Broadway display server, points the app at a throwaway Titanfall 2
layout (two mods, one broken mod, one plugin) unless --game-path is given,
then quits after a short timeout.

Usage:
    python -m scripts.smoke_ui [--timeout SECONDS] [--game-path PATH]
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import shutil
import subprocess
import tempfile
import time

from northstar_mods.logging_config import setup_logging


BROADWAY_DISPLAY = ":95"
BROADWAY_PORT = 18095


def write_fake_install(root: Path) -> Path:
    """Create a minimal R2Northstar tree under ``root`` and return ``root``."""
    mods = root / "R2Northstar" / "mods"
    plugins = root / "R2Northstar" / "plugins"
    for name, priority in (("Northstar.Client", 0), ("Smoke.Test", None)):
        mod_dir = mods / name
        mod_dir.mkdir(parents=True)
        fields = [f'"Name": "{name}"', '"Version": "1.0.0"', '"Description": "smoke"']
        if priority is not None:
            fields.append(f'"LoadPriority": {priority}')
        (mod_dir / "mod.json").write_text("{\n  " + ",\n  ".join(fields) + ",\n}\n")
    broken = mods / "Broken.Mod"
    broken.mkdir()
    (broken / "mod.json").write_text("{ not json")
    plugins.mkdir(parents=True)
    (plugins / "DiscordRPC.dll").write_bytes(b"")
    return root


def _start_broadway() -> subprocess.Popen | None:
    broadwayd = shutil.which("gtk4-broadwayd")
    if broadwayd is None:
        print("gtk4-broadwayd not found; cannot run headless UI smoke.")
        return None
    proc = subprocess.Popen(
        [broadwayd, BROADWAY_DISPLAY, "--port", str(BROADWAY_PORT), "--address", "127.0.0.1"],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    time.sleep(0.2)
    if proc.poll() is not None:
        print("Failed to start gtk4-broadwayd.")
        return None
    return proc


def _stop(proc: subprocess.Popen) -> None:
    if proc.poll() is not None:
        return
    proc.terminate()
    try:
        proc.wait(timeout=2)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait(timeout=2)


def run_app(game_path: Path, timeout: float) -> int:
    import gi

    gi.require_version("Gtk", "4.0")
    from gi.repository import GLib

    from northstar_mods.ui.app import NorthstarModsApp

    app = NorthstarModsApp(game_path)

    def _quit_app() -> bool:
        app.quit()
        return False

    GLib.timeout_add(max(100, int(timeout * 1000.0)), _quit_app)
    app.run([])
    print(f"UI smoke passed (headless Broadway, game path {game_path}).")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Headless GTK UI smoke check")
    parser.add_argument("--timeout", type=float, default=2.0, help="Seconds before clean quit.")
    parser.add_argument("--game-path", type=Path, default=None)
    args = parser.parse_args()

    proc = _start_broadway()
    if proc is None:
        return 1

    setup_logging(log_file=None, console_output=True)
    old_env = dict(os.environ)
    os.environ["GDK_BACKEND"] = "broadway"
    os.environ["BROADWAY_DISPLAY"] = BROADWAY_DISPLAY
    os.environ.setdefault("NO_AT_BRIDGE", "1")
    try:
        with tempfile.TemporaryDirectory(prefix="northstar-smoke-") as tmp:
            game_path = args.game_path or write_fake_install(Path(tmp))
            return run_app(game_path, args.timeout)
    except Exception as exc:  # pragma: no cover - runtime/system dependent
        print(f"UI smoke failed: {exc}")
        return 1
    finally:
        os.environ.clear()
        os.environ.update(old_env)
        _stop(proc)


if __name__ == "__main__":
    raise SystemExit(main())

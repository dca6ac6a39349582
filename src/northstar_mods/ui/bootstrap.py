"""Bootstrap helpers for resolving the game install and building UI runtime state."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

from northstar_mods.engine.browse_config import BrowseConfig
from northstar_mods.engine.mod_view import ModView
from northstar_mods.engine.pagination import PageCursor
from northstar_mods.errors import ModParseError
from northstar_mods.parser.discovery import FilesystemDiscovery
from northstar_mods.ui.controllers.mods_controller import ModsController
from northstar_mods.ui.state import UiState


logger = logging.getLogger(__name__)

GAME_PATH_ENV_VARS = ("NORTHSTAR_GAME_PATH", "TITANFALL2_PATH")
# Last resort when nothing else resolves; the stock Steam location on Windows.
FALLBACK_GAME_PATH = Path(r"C:\Program Files (x86)\Steam\steamapps\common\Titanfall2")


def _default_game_candidates() -> list[Path]:
    """Return likely Titanfall 2 install locations across environments."""
    home = Path.home()
    return [
        # Native Linux Steam library (Proton).
        home / ".local/share/Steam/steamapps/common/Titanfall2",
        home / ".steam/steam/steamapps/common/Titanfall2",
        # Flatpak Steam.
        home / ".var/app/com.valvesoftware.Steam/.local/share/Steam/steamapps/common/Titanfall2",
        # Windows Steam / Origin / EA app.
        FALLBACK_GAME_PATH,
        Path(r"C:\Program Files (x86)\Origin Games\Titanfall2"),
        Path(r"C:\Program Files\EA Games\Titanfall2"),
    ]


def _env_game_path() -> Path | None:
    for name in GAME_PATH_ENV_VARS:
        raw = os.environ.get(name)
        if raw and raw.strip():
            return Path(raw.strip()).expanduser()
    return None


def resolve_game_path(explicit: Path | None = None) -> Path:
    """Pick the game install: explicit path, then env vars, then known installs."""
    if explicit is not None:
        return explicit.expanduser()
    env_path = _env_game_path()
    if env_path is not None:
        return env_path
    for candidate in _default_game_candidates():
        if candidate.is_dir():
            return candidate
    logger.warning("No Titanfall 2 install found; using %s", FALLBACK_GAME_PATH)
    return FALLBACK_GAME_PATH


@dataclass(slots=True)
class BrowseSession:
    """Runtime objects needed by UI pages/controllers."""

    config: BrowseConfig
    game_path: Path
    controller: ModsController
    skipped_mods: dict[Path, str] = field(default_factory=dict)

    def record_skip(self, mod_dir: Path, error: ModParseError) -> None:
        self.skipped_mods[mod_dir] = error.reason


def bootstrap_default_session(
    game_path: Path | None = None,
    config: BrowseConfig | None = None,
) -> tuple[BrowseSession, UiState]:
    """Build a session for ``game_path`` (resolved if not given). Nothing is scanned yet."""
    config = config or BrowseConfig()
    resolved = resolve_game_path(game_path)
    discovery = FilesystemDiscovery(config)
    controller = ModsController(
        game_path=resolved,
        view=ModView(discovery, config),
        cursor=PageCursor(capacity=config.page_capacity),
    )
    session = BrowseSession(config=config, game_path=resolved, controller=controller)
    discovery.on_skip = session.record_skip
    state = UiState(error_display_seconds=config.error_display_seconds)
    logger.info("Browsing Northstar content under %s", resolved)
    return session, state

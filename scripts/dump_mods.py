"""Dump the discovered collection for a view kind.

Usage:
    python -m scripts.dump_mods [--game-path PATH] [--kind mods|plugins|packages|cta]
                                [--filter TEXT] [--show-skipped]
"""

import argparse
from pathlib import Path
import sys

from northstar_mods.engine.browse_config import BrowseConfig
from northstar_mods.engine.mod_view import ModView, styled_text_to_plain
from northstar_mods.errors import DiscoveryError, ModParseError
from northstar_mods.models.constants import ViewKind
from northstar_mods.parser.discovery import FilesystemDiscovery
from northstar_mods.ui.bootstrap import resolve_game_path


KIND_CHOICES: dict[str, ViewKind] = {kind.label.lower(): kind for kind in ViewKind}


def format_rows(view: ModView) -> list[str]:
    """One block per entry: title line then indented cell text."""
    rows: list[str] = []
    for index in range(view.count()):
        title = view.title_at(index)
        text = view.render_text_at(index)
        rows.append(f"[{index}] {title if title is not None else 'UNK'}")
        if text is not None:
            for line in styled_text_to_plain(text).splitlines():
                rows.append(f"    {line}")
    return rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump installed Northstar content")
    parser.add_argument("--game-path", type=Path, default=None, help="Titanfall 2 install directory")
    parser.add_argument("--kind", choices=sorted(KIND_CHOICES), default="mods")
    parser.add_argument("--filter", default=None, help="Keep entries whose name contains TEXT")
    parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="List mod directories dropped because of an invalid mod.json",
    )
    args = parser.parse_args(argv)

    skipped: list[tuple[Path, ModParseError]] = []
    config = BrowseConfig()
    discovery = FilesystemDiscovery(config, on_skip=lambda path, exc: skipped.append((path, exc)))
    view = ModView(discovery, config)
    view.switch(int(KIND_CHOICES[args.kind]))

    game_path = resolve_game_path(args.game_path)
    try:
        view.reload(game_path)
    except DiscoveryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.filter:
        view.filter(args.filter)

    print(f"{view.kind.label}: {view.count()} entr{'y' if view.count() == 1 else 'ies'}")
    for row in format_rows(view):
        print(row)

    if args.show_skipped and skipped:
        print(f"\nSkipped {len(skipped)} mod director{'y' if len(skipped) == 1 else 'ies'}:")
        for path, exc in skipped:
            print(f"  {path.name}: {exc.reason}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

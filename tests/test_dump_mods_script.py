from pathlib import Path

import scripts.dump_mods as dump_mods


def _install(game: Path) -> None:
    mods = game / "R2Northstar" / "mods"
    for name, priority in (("Alpha.Mod", 5), ("Beta.Mod", None)):
        mod_dir = mods / name
        mod_dir.mkdir(parents=True)
        extra = f', "LoadPriority": {priority}' if priority is not None else ""
        (mod_dir / "mod.json").write_text(
            f'{{"Name": "{name}", "Version": "1.0", "Description": "about {name}"{extra}}}',
            encoding="utf-8",
        )
    broken = mods / "Broken"
    broken.mkdir()
    (broken / "mod.json").write_text("nope", encoding="utf-8")
    plugins = game / "R2Northstar" / "plugins"
    plugins.mkdir(parents=True)
    (plugins / "DiscordRPC.dll").write_bytes(b"")


def test_dump_mods_prints_entries_and_skipped(tmp_path, capsys):
    _install(tmp_path)

    code = dump_mods.main(["--game-path", str(tmp_path), "--show-skipped"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Mods: 2 entries")
    assert "Alpha.Mod" in out
    assert "    1.0|5" in out
    assert "    1.0|999" in out
    assert "Skipped 1 mod directory:" in out
    assert "Broken:" in out


def test_dump_mods_filter_and_plugins(tmp_path, capsys):
    _install(tmp_path)

    assert dump_mods.main(["--game-path", str(tmp_path), "--filter", "Beta"]) == 0
    out = capsys.readouterr().out
    assert "Mods: 1 entry" in out
    assert "Alpha.Mod" not in out

    assert dump_mods.main(["--game-path", str(tmp_path), "--kind", "plugins"]) == 0
    assert "[0] DiscordRPC.dll" in capsys.readouterr().out


def test_dump_mods_missing_root_returns_error(tmp_path, capsys):
    code = dump_mods.main(["--game-path", str(tmp_path / "nothing")])

    assert code == 1
    assert "Directory not found" in capsys.readouterr().err


def test_format_rows_for_placeholder_has_titles_only():
    view = dump_mods.ModView()
    view.switch(3)

    rows = dump_mods.format_rows(view)

    assert rows == [f"[{i}] CTA VIEW" for i in range(5)]

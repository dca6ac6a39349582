from pathlib import Path

import pytest

from northstar_mods.engine.browse_config import BrowseConfig
from northstar_mods.errors import DiscoveryError, RootNotFoundError, RootNotReadableError
from northstar_mods.models.constants import ViewKind
from northstar_mods.parser.discovery import (
    FilesystemDiscovery,
    discover_mods,
    discover_plugins,
    resolve_root,
)


def _write_mod(game: Path, dir_name: str, mod_json: str) -> Path:
    mod_dir = game / "R2Northstar" / "mods" / dir_name
    mod_dir.mkdir(parents=True)
    (mod_dir / "mod.json").write_text(mod_json, encoding="utf-8")
    return mod_dir


def _valid(name: str) -> str:
    return f'{{"Name": "{name}", "Version": "1.0.0", "Description": "{name} mod"}}'


def test_discover_mods_parses_each_subdirectory(tmp_path):
    _write_mod(tmp_path, "a", _valid("Alpha"))
    _write_mod(tmp_path, "b", _valid("Beta"))
    # Stray files next to mod directories are ignored.
    (tmp_path / "R2Northstar" / "mods" / "readme.txt").write_text("x")

    mods = discover_mods(tmp_path)

    assert sorted(m.display_name for m in mods) == ["Alpha", "Beta"]
    assert all(m.source_path.parent == (tmp_path / "R2Northstar" / "mods").resolve() for m in mods)


def test_discover_mods_skips_invalid_mod_json_and_reports_it(tmp_path):
    _write_mod(tmp_path, "good", _valid("Good"))
    bad = _write_mod(tmp_path, "bad", "{ nope")
    skipped = []

    mods = discover_mods(tmp_path, on_skip=lambda path, exc: skipped.append((path.name, exc)))

    assert [m.display_name for m in mods] == ["Good"]
    assert [name for name, _exc in skipped] == [bad.name]
    assert skipped[0][1].mod_dir.name == "bad"


def test_discover_mods_skips_deeply_nested_mod_json(tmp_path):
    _write_mod(tmp_path, "good", _valid("Good"))
    _write_mod(tmp_path, "bad", "[" * 100000)
    skipped = []

    mods = discover_mods(tmp_path, on_skip=lambda path, exc: skipped.append(path.name))

    assert [m.display_name for m in mods] == ["Good"]
    assert skipped == ["bad"]


def test_discover_mods_keeps_mod_with_deeply_nested_manifest(tmp_path):
    good = _write_mod(tmp_path, "good", _valid("Good"))
    (good / "manifest.json").write_text("[" * 100000, encoding="utf-8")

    mods = discover_mods(tmp_path)

    assert [m.display_name for m in mods] == ["Good"]
    assert mods[0].manifest is None


def test_discover_mods_with_empty_root_returns_empty_list(tmp_path):
    (tmp_path / "R2Northstar" / "mods").mkdir(parents=True)

    assert discover_mods(tmp_path) == []


def test_discover_mods_missing_root_raises_root_not_found(tmp_path):
    with pytest.raises(RootNotFoundError):
        discover_mods(tmp_path)


def test_resolve_root_rejects_plain_file(tmp_path):
    (tmp_path / "R2Northstar").mkdir()
    (tmp_path / "R2Northstar" / "mods").write_text("not a directory")

    with pytest.raises(RootNotFoundError, match="Not a directory"):
        resolve_root(tmp_path, ("R2Northstar", "mods"))


def test_unlistable_root_raises_root_not_readable(tmp_path, monkeypatch):
    (tmp_path / "R2Northstar" / "mods").mkdir(parents=True)

    def _denied(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "iterdir", _denied)

    with pytest.raises(RootNotReadableError) as excinfo:
        discover_mods(tmp_path)
    assert isinstance(excinfo.value, DiscoveryError)


def test_discover_plugins_keeps_only_dll_files(tmp_path):
    plugins = tmp_path / "R2Northstar" / "plugins"
    plugins.mkdir(parents=True)
    (plugins / "DiscordRPC.dll").write_bytes(b"")
    (plugins / "Upper.DLL").write_bytes(b"")
    (plugins / "notes.txt").write_text("x")
    (plugins / "folder.dll").mkdir()

    names = [p.name for p in discover_plugins(tmp_path)]

    assert names == ["DiscordRPC.dll"]


def test_discover_plugins_missing_root_raises(tmp_path):
    with pytest.raises(RootNotFoundError):
        discover_plugins(tmp_path)


def test_filesystem_discovery_uses_configured_layout(tmp_path):
    custom = tmp_path / "custom" / "plugs"
    custom.mkdir(parents=True)
    (custom / "a.so").write_bytes(b"")
    (custom / "b.dll").write_bytes(b"")
    config = BrowseConfig(plugins_subpath=("custom", "plugs"), plugin_extension="so")

    found = FilesystemDiscovery(config).discover(tmp_path, ViewKind.PLUGINS)

    assert [p.name for p in found] == ["a.so"]


@pytest.mark.parametrize("kind", [ViewKind.PACKAGES, ViewKind.PLACEHOLDER])
def test_filesystem_discovery_kinds_without_backing_files_touch_nothing(tmp_path, kind):
    missing = tmp_path / "does-not-exist"

    assert FilesystemDiscovery().discover(missing, kind) == []

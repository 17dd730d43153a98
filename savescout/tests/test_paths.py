from __future__ import annotations

import os
from pathlib import Path

import pytest

from core import paths
from core.paths import get_default_saves_dir, path_to_display


def test_default_saves_dir_joins_game_and_saves(tmp_path: Path) -> None:
    result = get_default_saves_dir(tmp_path, Path("/unused"))
    assert result == tmp_path / "StardewValley" / "Saves"


def test_default_saves_dir_uses_fallback_without_data_dir(tmp_path: Path) -> None:
    result = get_default_saves_dir(None, tmp_path)
    assert result == tmp_path / "StardewValley" / "Saves"


def test_path_to_display_plain_path() -> None:
    assert path_to_display(Path("Saves") / "FarmA") == os.path.join("Saves", "FarmA")


@pytest.mark.skipif(os.name == "nt", reason="POSIX paths carry raw bytes")
def test_path_to_display_replaces_undecodable_bytes() -> None:
    raw_name = os.fsdecode(b"Farm\xff")
    result = path_to_display(Path("/saves") / raw_name)
    assert result == "/saves/Farm\ufffd"


@pytest.mark.skipif(os.name == "nt", reason="XDG lookup applies to POSIX only")
def test_os_data_dir_prefers_xdg_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert paths.get_os_data_dir() == tmp_path


@pytest.mark.skipif(os.name == "nt", reason="XDG lookup applies to POSIX only")
def test_os_data_dir_ignores_relative_xdg(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", "relative/dir")
    assert paths.get_os_data_dir() == Path.home() / ".local" / "share"

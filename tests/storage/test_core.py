"""Tests for storage initialization and path helpers."""

from backend import storage


def test_init_creates_directory(tmp_path):
    target = tmp_path / "nested" / "data"
    storage.init_storage(target)
    assert target.is_dir()
    assert storage.data_dir() == target


def test_paths_live_in_data_dir(tmp_path):
    storage.init_storage(tmp_path)
    assert storage.game_state_path() == tmp_path / "game.json"
    assert storage.config_path() == tmp_path / "config.json"

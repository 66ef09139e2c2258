"""Tests for game settings storage."""

import json

from backend import storage


def test_get_config_empty():
    """Returns defaults when no config file exists."""
    config = storage.get_config()
    assert config == {
        "game_name": "OnePiecedle",
        "share_link": "https://onepiecedle.com",
        "search_limit": 10,
    }


def test_update_config_partial():
    storage.update_config({"search_limit": 5})
    storage.update_config({"game_name": "Grand Linedle"})

    config = storage.get_config()
    assert config["search_limit"] == 5
    assert config["game_name"] == "Grand Linedle"
    assert config["share_link"] == "https://onepiecedle.com"


def test_update_config_ignores_unknown_keys():
    result = storage.update_config({"theme": "dark"})
    assert "theme" not in result
    assert "theme" not in json.loads(storage.config_path().read_text())


def test_stored_values_merged_with_defaults():
    storage.config_path().write_text(json.dumps({"share_link": "https://example.com"}))
    config = storage.get_config()
    assert config["share_link"] == "https://example.com"
    assert config["game_name"] == "OnePiecedle"

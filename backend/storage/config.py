"""Game settings (display name, share link, autocomplete size)."""

import json
from typing import Any

from .core import config_path

_CONFIG_DEFAULTS: dict[str, Any] = {
    "game_name": "OnePiecedle",
    "share_link": "https://onepiecedle.com",
    "search_limit": 10,
}


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config = dict(_CONFIG_DEFAULTS)
    path = config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into config and persist. Returns full config."""
    config = get_config()
    for key, value in fields.items():
        if key in _CONFIG_DEFAULTS:
            config[key] = value
    config_path().write_text(json.dumps(config, indent=2))
    return config

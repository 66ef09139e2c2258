"""File-based JSON storage.

Data layout:
  data/
    game.json     Persisted game state (StorageSchema): version, daily rounds
                  keyed by UTC date, the current infinite round, and stats
    config.json   Game settings (game name, share link, search limit)

game.json is owned by a Store object (JsonStore) that the app factory
creates and hands to the session layer; nothing reads it through module
state. The data directory itself is configured once via init_storage().

Version handling: a stored version other than STORAGE_VERSION, unparseable
JSON, or data failing validation resets to a fresh schema.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates; unknown keys are ignored.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    config_path,
    data_dir,
    game_state_path,
    init_storage,
)

from .store import (  # noqa: F401
    JsonStore,
    MemoryStore,
    Store,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)

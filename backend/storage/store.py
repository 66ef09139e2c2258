"""Versioned JSON store for game state.

The session layer talks to a Store (load/save); the engine never does.
load() is fail-safe: a missing, unparseable, invalid or wrong-version file
is replaced by a freshly initialized schema, which is written back
immediately so the infinite round id stays stable across loads.

Two browser tabs (or two processes) sharing a file race; last write wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Protocol

from pydantic import ValidationError

from onepiecedle.images import normalize_guess_image
from onepiecedle.models import STORAGE_VERSION, StorageSchema
from onepiecedle.selection import generate_round_id
from onepiecedle.session import default_schema

logger = logging.getLogger(__name__)


class Store(Protocol):
    def load(self) -> StorageSchema: ...

    def save(self, schema: StorageSchema) -> None: ...


def _normalize_images(schema: StorageSchema) -> bool:
    """Point every stored guess at its local image. Returns True if changed."""
    changed = False
    rounds = [schema.infinite, *schema.daily.values()]
    for state in rounds:
        normalized = [normalize_guess_image(g) for g in state.guesses]
        if any(new is not old for new, old in zip(normalized, state.guesses)):
            state.guesses = normalized
            changed = True
    return changed


class JsonStore:
    def __init__(
        self, path: Path, round_id_factory: Callable[[], str] = generate_round_id
    ) -> None:
        self._path = path
        self._round_id_factory = round_id_factory

    @property
    def path(self) -> Path:
        return self._path

    def _reset(self, reason: str) -> StorageSchema:
        if reason:
            logger.warning("Resetting game state at %s: %s", self._path, reason)
        schema = default_schema(self._round_id_factory())
        self.save(schema)
        return schema

    def load(self) -> StorageSchema:
        if not self._path.is_file():
            return self._reset("")
        try:
            raw = json.loads(self._path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._reset(f"invalid JSON ({e})")
        if not isinstance(raw, dict):
            return self._reset("not a JSON object")
        if raw.get("version") != STORAGE_VERSION:
            # No migrations yet: older layouts are discarded
            return self._reset(f"version {raw.get('version')!r} != {STORAGE_VERSION}")
        try:
            schema = StorageSchema.model_validate(raw)
        except ValidationError as e:
            return self._reset(f"{e.error_count()} validation error(s)")
        if _normalize_images(schema):
            self.save(schema)
        return schema

    def save(self, schema: StorageSchema) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(schema.model_dump_json(indent=2))

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class MemoryStore:
    """In-process store; keeps a deep copy so callers cannot alias it."""

    def __init__(self, round_id_factory: Callable[[], str] = generate_round_id) -> None:
        self._round_id_factory = round_id_factory
        self._schema: StorageSchema | None = None

    def load(self) -> StorageSchema:
        if self._schema is None:
            self._schema = default_schema(self._round_id_factory())
        return self._schema.model_copy(deep=True)

    def save(self, schema: StorageSchema) -> None:
        self._schema = schema.model_copy(deep=True)

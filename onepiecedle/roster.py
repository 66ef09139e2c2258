"""Roster decoding: raw JSON records → validated Entity list.

Runs once at load time. Portrait refs outside the bundled image directory are
rewritten to the local path. Records that fail validation, and records whose id
repeats an earlier one, are dropped and reported as RosterIssue entries; the
engine only ever sees validated entities.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, ValidationError

from onepiecedle.images import normalize_entity_image
from onepiecedle.models import Entity

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """The roster file itself could not be read or is not a JSON list."""


class RosterIssue(NamedTuple):
    index: int
    entity_id: str | None
    reason: str


class RosterResult(BaseModel):
    entities: list[Entity] = Field(default_factory=list)
    errors: list[RosterIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_roster(records: list[Any]) -> RosterResult:
    """Validate every record, keeping the valid ones in their original order."""
    result = RosterResult()
    seen: set[str] = set()
    for index, record in enumerate(records):
        raw_id = record.get("id") if isinstance(record, dict) else None
        entity_id = raw_id if isinstance(raw_id, str) else None
        try:
            entity = normalize_entity_image(Entity.model_validate(record))
        except ValidationError as e:
            result.errors.append(RosterIssue(index, entity_id, _describe(e)))
            continue
        if entity.id in seen:
            result.errors.append(RosterIssue(index, entity.id, f"duplicate id {entity.id!r}"))
            continue
        seen.add(entity.id)
        result.entities.append(entity)

    for issue in result.errors:
        logger.warning("Roster record %d (%s) dropped: %s", issue.index, issue.entity_id, issue.reason)
    return result


def load_roster(path: Path) -> RosterResult:
    """Read a roster JSON file (a list of records) and validate it."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RosterError(f"Cannot read roster {path}: {e}") from e
    if not isinstance(data, list):
        raise RosterError(f"Roster {path} must contain a JSON list")
    result = parse_roster(data)
    logger.info("Loaded %d characters from %s", len(result.entities), path)
    return result

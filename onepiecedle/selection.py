"""Target selection for daily and infinite mode.

Selection is a pure function of (roster order, seed). The daily seed comes
from the UTC date string, the infinite seed from the round id. Clock values
are always parameters; only the outermost callers fall back to the real
clock.
"""

from __future__ import annotations

import logging
import math
import random
import time
from datetime import date, datetime, timedelta, timezone
from typing import Sequence

from onepiecedle.models import Entity
from onepiecedle.rng import date_to_seed, mulberry32, round_id_to_seed

logger = logging.getLogger(__name__)

REFERENCE_DATE = date(2024, 1, 1)  # daily game #1


class EmptyRosterError(ValueError):
    """Raised when a target is requested from an empty roster."""


def select_deterministic(roster: Sequence[Entity], seed: int) -> Entity:
    """Pick one entity using the first draw of mulberry32(seed)."""
    if not roster:
        raise EmptyRosterError("Cannot select a target from an empty roster")
    rng = mulberry32(seed)
    return roster[math.floor(rng() * len(roster))]


def entity_sequence(roster: Sequence[Entity], seed: int, count: int) -> list[Entity]:
    """`count` successive selections from a single generator."""
    if not roster:
        raise EmptyRosterError("Cannot select a target from an empty roster")
    rng = mulberry32(seed)
    return [roster[math.floor(rng() * len(roster))] for _ in range(count)]


# ── Daily ───────────────────────────────────────────────────


def utc_date_string(now: datetime | None = None) -> str:
    """Current UTC calendar date as YYYY-MM-DD."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%d")


def select_daily(roster: Sequence[Entity], date_string: str) -> Entity:
    target = select_deterministic(roster, date_to_seed(date_string))
    logger.debug("daily target date=%s id=%s", date_string, target.id)
    return target


def daily_game_number(date_string: str) -> int:
    """Days since REFERENCE_DATE, 1-based: 2024-01-01 is game #1."""
    current = date.fromisoformat(date_string)
    return (current - REFERENCE_DATE).days + 1


def is_today(date_string: str, now: datetime | None = None) -> bool:
    return date_string == utc_date_string(now)


def time_until_reset(now: datetime | None = None) -> tuple[int, int, int]:
    """(hours, minutes, seconds) until the next UTC midnight."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    tomorrow = datetime.combine(now.date() + timedelta(days=1), datetime.min.time(), timezone.utc)
    remaining = int((tomorrow - now).total_seconds())
    hours, rest = divmod(remaining, 3600)
    minutes, seconds = divmod(rest, 60)
    return hours, minutes, seconds


# ── Infinite ────────────────────────────────────────────────


def generate_round_id(now_ms: int | None = None, rand: int | None = None) -> str:
    """Round id of the form "<epoch millis>-<0..999999>"."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    if rand is None:
        rand = random.randint(0, 999_999)
    return f"{now_ms}-{rand}"


def select_infinite(roster: Sequence[Entity], round_id: str) -> Entity:
    target = select_deterministic(roster, round_id_to_seed(round_id))
    logger.debug("infinite target round=%s id=%s", round_id, target.id)
    return target

"""Round state machine for daily and infinite mode.

    Active ──correct guess──▶ Won   (terminal)
      │
      └──6th wrong guess────▶ Lost  (terminal)

Transitions are pure: each function takes a state and returns a new one,
leaving the input untouched. Duplicate guesses (same entity id twice in a
round) and guesses against a terminal round are refused with
accepted=False and the state returned unchanged, so the caller can show a
warning. Storage is the caller's concern; record_daily()/record_infinite()
fold a round back into the persisted schema.

Counters:
  daily     win → streak += 1, max_streak = max(max_streak, streak)
            loss → streak = 0
  infinite  win → total_wins += 1, total_games += 1
            loss → total_games += 1
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from onepiecedle.models import (
    DailyState,
    GuessResult,
    InfiniteState,
    Stats,
    StorageSchema,
)
from onepiecedle.rng import round_id_to_seed

logger = logging.getLogger(__name__)

MAX_GUESSES = 6


class GuessOutcome(NamedTuple):
    state: DailyState | InfiniteState
    accepted: bool


def _accepts(state: DailyState | InfiniteState, guess: GuessResult) -> bool:
    if state.is_finished:
        logger.debug("guess %s refused: round finished", guess.entity_id)
        return False
    if guess.entity_id in state.guessed_ids:
        logger.debug("guess %s refused: duplicate", guess.entity_id)
        return False
    return True


# ── Daily ───────────────────────────────────────────────────


def new_daily_state(date: str, stats: Stats | None = None) -> DailyState:
    """Fresh round for a date, seeded with the last known streaks."""
    stats = stats or Stats()
    return DailyState(
        date=date,
        streak=stats.daily_streak,
        max_streak=stats.daily_max_streak,
    )


def daily_state_for(schema: StorageSchema, date: str) -> DailyState:
    """Stored round for a date, or a fresh one (not yet recorded)."""
    stored = schema.daily.get(date)
    if stored is not None:
        return stored
    return new_daily_state(date, schema.stats)


def add_daily_guess(state: DailyState, guess: GuessResult) -> GuessOutcome:
    if not _accepts(state, guess):
        return GuessOutcome(state, False)

    new = state.model_copy(deep=True)
    new.guesses.append(guess)
    new.guessed_ids.append(guess.entity_id)

    if guess.is_correct:
        new.is_won = True
        new.is_finished = True
        new.streak += 1
        new.max_streak = max(new.max_streak, new.streak)
    elif len(new.guesses) >= MAX_GUESSES:
        new.is_finished = True
        new.streak = 0
    return GuessOutcome(new, True)


def record_daily(schema: StorageSchema, state: DailyState) -> StorageSchema:
    """Store a daily round and, once it is finished, update the streak stats."""
    new = schema.model_copy(deep=True)
    new.daily[state.date] = state
    if state.is_finished:
        if state.is_won:
            new.stats.daily_streak = state.streak
            new.stats.daily_max_streak = max(new.stats.daily_max_streak, state.streak)
        else:
            new.stats.daily_streak = 0
    return new


# ── Infinite ────────────────────────────────────────────────


def new_infinite_state(
    round_id: str, total_wins: int = 0, total_games: int = 0
) -> InfiniteState:
    return InfiniteState(
        round_id=round_id,
        seed=round_id_to_seed(round_id),
        total_wins=total_wins,
        total_games=total_games,
    )


def add_infinite_guess(
    state: InfiniteState, guess: GuessResult
) -> GuessOutcome:
    if not _accepts(state, guess):
        return GuessOutcome(state, False)

    new = state.model_copy(deep=True)
    new.guesses.append(guess)
    new.guessed_ids.append(guess.entity_id)

    if guess.is_correct:
        new.is_won = True
        new.is_finished = True
        new.total_wins += 1
        new.total_games += 1
    elif len(new.guesses) >= MAX_GUESSES:
        new.is_finished = True
        new.total_games += 1
    return GuessOutcome(new, True)


def start_new_infinite_round(state: InfiniteState, round_id: str) -> InfiniteState:
    """Replace the round, carrying cumulative totals forward."""
    return new_infinite_state(round_id, state.total_wins, state.total_games)


def record_infinite(schema: StorageSchema, state: InfiniteState) -> StorageSchema:
    new = schema.model_copy(deep=True)
    new.infinite = state
    new.stats.infinite_total_wins = state.total_wins
    new.stats.infinite_total_games = state.total_games
    return new


def default_schema(round_id: str) -> StorageSchema:
    """Freshly initialized storage with an empty infinite round."""
    return StorageSchema(infinite=new_infinite_state(round_id))

"""Game sessions: the layer between the store and the engine.

Each call loads the schema from the Store, runs the pure engine
(selection, evaluation, state transitions) and saves the result. The
clock is injected so tests can pin the date; it defaults to UTC now.

Submitting a guess:
  1. Unknown entity id → UnknownEntityError
  2. Round already finished → RoundFinishedError
  3. Entity already guessed this round → accepted=False, nothing saved
  4. Otherwise evaluate against the round's target, transition, save
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple, Sequence

from backend.storage import Store
from onepiecedle.evaluate import evaluate_guess
from onepiecedle.models import (
    DailyState,
    Entity,
    GameMode,
    GuessResult,
    InfiniteState,
    Stats,
)
from onepiecedle.search import find_by_id
from onepiecedle.selection import (
    generate_round_id,
    select_daily,
    select_infinite,
    utc_date_string,
)
from onepiecedle.session import (
    add_daily_guess,
    add_infinite_guess,
    daily_state_for,
    record_daily,
    record_infinite,
    start_new_infinite_round,
)
from onepiecedle.share import GAME_NAME, SHARE_LINK, format_share_text

logger = logging.getLogger(__name__)


class GameError(Exception):
    """Base class for guess submissions the session refuses."""


class UnknownEntityError(GameError):
    pass


class RoundFinishedError(GameError):
    pass


class RoundNotFinishedError(GameError):
    pass


class SubmitResult(NamedTuple):
    state: DailyState | InfiniteState
    result: GuessResult | None  # None when the guess was not accepted
    accepted: bool


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameSession:
    def __init__(
        self,
        store: Store,
        roster: Sequence[Entity],
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store = store
        self._roster = roster
        self._clock = clock

    @property
    def roster(self) -> Sequence[Entity]:
        return self._roster

    def today(self) -> str:
        return utc_date_string(self._clock())

    def _entity(self, entity_id: str) -> Entity:
        entity = find_by_id(self._roster, entity_id)
        if entity is None:
            raise UnknownEntityError(f"Unknown character '{entity_id}'")
        return entity

    # ── Daily ───────────────────────────────────────────────

    def daily_state(self, date: str | None = None) -> DailyState:
        return daily_state_for(self._store.load(), date or self.today())

    def daily_target(self, date: str | None = None) -> Entity:
        return select_daily(self._roster, date or self.today())

    def submit_daily(self, entity_id: str, date: str | None = None) -> SubmitResult:
        date = date or self.today()
        guess = self._entity(entity_id)
        schema = self._store.load()
        state = daily_state_for(schema, date)
        if state.is_finished:
            raise RoundFinishedError(f"Daily round {date} is already finished")
        if entity_id in state.guessed_ids:
            return SubmitResult(state, None, False)

        result = evaluate_guess(guess, select_daily(self._roster, date))
        outcome = add_daily_guess(state, result)
        self._store.save(record_daily(schema, outcome.state))
        logger.info(
            "daily %s guess %d: %s correct=%s",
            date, len(outcome.state.guesses), entity_id, result.is_correct,
        )
        return SubmitResult(outcome.state, result, outcome.accepted)

    # ── Infinite ────────────────────────────────────────────

    def infinite_state(self) -> InfiniteState:
        return self._store.load().infinite

    def infinite_target(self) -> Entity:
        return select_infinite(self._roster, self.infinite_state().round_id)

    def submit_infinite(self, entity_id: str) -> SubmitResult:
        guess = self._entity(entity_id)
        schema = self._store.load()
        state = schema.infinite
        if state.is_finished:
            raise RoundFinishedError(f"Infinite round {state.round_id} is already finished")
        if entity_id in state.guessed_ids:
            return SubmitResult(state, None, False)

        result = evaluate_guess(guess, select_infinite(self._roster, state.round_id))
        outcome = add_infinite_guess(state, result)
        self._store.save(record_infinite(schema, outcome.state))
        logger.info(
            "infinite %s guess %d: %s correct=%s",
            state.round_id, len(outcome.state.guesses), entity_id, result.is_correct,
        )
        return SubmitResult(outcome.state, result, outcome.accepted)

    def new_infinite_round(self, round_id: str | None = None) -> InfiniteState:
        if round_id is None:
            now_ms = int(self._clock().timestamp() * 1000)
            round_id = generate_round_id(now_ms)
        schema = self._store.load()
        state = start_new_infinite_round(schema.infinite, round_id)
        self._store.save(record_infinite(schema, state))
        logger.info("new infinite round %s", round_id)
        return state

    # ── Stats / share ───────────────────────────────────────

    def stats(self) -> Stats:
        return self._store.load().stats

    def share_text(
        self,
        mode: GameMode,
        date: str | None = None,
        *,
        game_name: str = GAME_NAME,
        link: str = SHARE_LINK,
    ) -> str:
        """Share text for a finished round."""
        if mode == "daily":
            date = date or self.today()
            state: DailyState | InfiniteState = self.daily_state(date)
        else:
            state = self.infinite_state()
        if not state.is_finished:
            raise RoundNotFinishedError("Round is not finished yet")
        return format_share_text(
            state.guesses, mode, state.is_won, date, game_name=game_name, link=link,
        )

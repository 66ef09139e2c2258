"""Daily round endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from backend.game import GameSession, RoundFinishedError, UnknownEntityError
from onepiecedle.selection import daily_game_number

from .deps import check_date, get_session
from .models import DailyGuessBody

router = APIRouter()


@router.get("/daily")
async def get_daily(date: str | None = None, session: GameSession = Depends(get_session)):
    """Daily round state (created lazily, not persisted until the first guess)."""
    check_date(date)
    state = session.daily_state(date)
    return {"game_number": daily_game_number(state.date), "state": state}


@router.post("/daily/guess")
async def guess_daily(body: DailyGuessBody, session: GameSession = Depends(get_session)):
    """Submit a guess for the daily round."""
    check_date(body.date)
    try:
        submitted = session.submit_daily(body.entity_id, body.date)
    except UnknownEntityError as e:
        raise HTTPException(404, str(e))
    except RoundFinishedError as e:
        raise HTTPException(409, str(e))
    if not submitted.accepted:
        raise HTTPException(409, f"You already guessed '{body.entity_id}'!")
    return {"state": submitted.state, "result": submitted.result}


@router.get("/daily/answer")
async def daily_answer(date: str | None = None, session: GameSession = Depends(get_session)):
    """Reveal the daily target once the round is finished."""
    check_date(date)
    if not session.daily_state(date).is_finished:
        raise HTTPException(403, "Round is still in progress")
    return session.daily_target(date)

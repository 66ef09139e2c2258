"""Infinite round endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from backend.game import GameSession, RoundFinishedError, UnknownEntityError

from .deps import get_session
from .models import InfiniteGuessBody

router = APIRouter()


@router.get("/infinite")
async def get_infinite(session: GameSession = Depends(get_session)):
    """Current infinite round state."""
    return session.infinite_state()


@router.post("/infinite/guess")
async def guess_infinite(body: InfiniteGuessBody, session: GameSession = Depends(get_session)):
    """Submit a guess for the current infinite round."""
    try:
        submitted = session.submit_infinite(body.entity_id)
    except UnknownEntityError as e:
        raise HTTPException(404, str(e))
    except RoundFinishedError as e:
        raise HTTPException(409, str(e))
    if not submitted.accepted:
        raise HTTPException(409, f"You already guessed '{body.entity_id}'!")
    return {"state": submitted.state, "result": submitted.result}


@router.post("/infinite/new", status_code=201)
async def new_infinite(session: GameSession = Depends(get_session)):
    """Start a new infinite round, keeping total wins/games."""
    return session.new_infinite_round()


@router.get("/infinite/answer")
async def infinite_answer(session: GameSession = Depends(get_session)):
    """Reveal the infinite target once the round is finished."""
    if not session.infinite_state().is_finished:
        raise HTTPException(403, "Round is still in progress")
    return session.infinite_target()

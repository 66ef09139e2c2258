"""Health check, settings, stats and share endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from backend import storage
from backend.game import GameSession, RoundNotFinishedError

from .deps import check_date, get_session
from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get game settings (name, share link, search limit)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update game settings (partial merge)."""
    return storage.update_config(body.model_dump(exclude_none=True))


@router.get("/stats")
async def get_stats(session: GameSession = Depends(get_session)):
    """Daily streaks and infinite totals."""
    return session.stats()


@router.get("/share")
async def share(
    mode: Literal["daily", "infinite"] = "daily",
    date: str | None = None,
    session: GameSession = Depends(get_session),
):
    """Shareable emoji summary of a finished round."""
    check_date(date)
    config = storage.get_config()
    try:
        text = session.share_text(
            mode, date, game_name=config["game_name"], link=config["share_link"],
        )
    except RoundNotFinishedError as e:
        raise HTTPException(409, str(e))
    return {"text": text}

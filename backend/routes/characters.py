"""Character search and category endpoints."""

from fastapi import APIRouter, Depends, Query

from backend import storage
from backend.game import GameSession
from onepiecedle.categories import category_labels
from onepiecedle.search import search_entities

from .deps import get_session

router = APIRouter()


@router.get("/characters")
async def search_characters(
    q: str = "",
    limit: int | None = Query(None, ge=1),
    session: GameSession = Depends(get_session),
):
    """Autocomplete: best name/alias matches first."""
    if limit is None:
        limit = storage.get_config()["search_limit"]
    return [
        {"id": e.id, "name": e.name, "aliases": e.aliases, "image_ref": e.image_ref}
        for e in search_entities(session.roster, q, limit)
    ]


@router.get("/categories")
async def list_categories():
    """Category labels in evaluation order."""
    return category_labels()

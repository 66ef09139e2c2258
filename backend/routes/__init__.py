"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, config, stats, share), characters
(autocomplete search, category labels), daily rounds, infinite rounds.
Round endpoints never reveal the target until the round is finished.
"""

from fastapi import APIRouter

from .characters import router as characters_router
from .daily import router as daily_router
from .infinite import router as infinite_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(characters_router)
router.include_router(daily_router)
router.include_router(infinite_router)

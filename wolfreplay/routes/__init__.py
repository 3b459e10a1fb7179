"""FastAPI API endpoints under /api.

Endpoint groups: health + settings, games (list, raw transcript, parsed
events). Per-game resources are nested under /api/games/{game_id}/.
"""

from fastapi import APIRouter

from .games import router as games_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(games_router)

"""FastAPI API endpoints under /api.

Endpoint groups: health/settings, areas (with their enemies), players
(create, lookup, position), combat, quests.
"""

from fastapi import APIRouter

from .areas import router as areas_router
from .combat import router as combat_router
from .players import router as players_router
from .quests import router as quests_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(areas_router)
router.include_router(players_router)
router.include_router(combat_router)
router.include_router(quests_router)

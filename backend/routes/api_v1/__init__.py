"""API v1: health, sports, teams and matches (read-only)."""

from fastapi import APIRouter

from .health import router as health_router
from .matches import router as matches_router
from .sports import router as sports_router
from .teams import router as teams_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(health_router)
router.include_router(sports_router)
router.include_router(teams_router)
router.include_router(matches_router)

api_v1_router = router

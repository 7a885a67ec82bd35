"""GET /api/v1/health: liveness plus a database ping."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from core.dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Health check")
async def get_health(request: Request):
    """Report API status and whether the database answers a trivial query."""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        await get_database(request).ping()
    except (SQLAlchemyError, RuntimeError) as e:
        logger.error("Health check database ping failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "API is not running",
                "timestamp": timestamp,
                "database": "Disconnected",
                "error": str(e),
            },
        )
    return {
        "success": True,
        "message": "Sports Prediction API is running",
        "timestamp": timestamp,
        "database": "Connected",
    }

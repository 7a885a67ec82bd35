"""Sports API: list sports, one sport, its teams and its matches."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from core.errors import InternalFailure, NotFound, ValidationFailed
from core.validation import parse_int, validate_id
from repositories.sport_repo import SportRepository
from repositories.team_repo import TeamRepository
from services.match_service import build_match_filters, list_matches_page
from .envelope import success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sports", tags=["sports"])


def _sport_id(raw: str) -> int:
    validation = validate_id(raw)
    if not validation.is_valid:
        raise ValidationFailed("Invalid sport ID", errors=validation.errors)
    return parse_int(raw)


@router.get("", summary="List sports")
async def get_sports(session: AsyncSession = Depends(get_db_session)) -> dict:
    """GET /api/v1/sports -> all sports ordered by name."""
    try:
        sports = await SportRepository(session).list_sports()
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch sports")
        raise InternalFailure("Failed to fetch sports", error=str(e)) from e
    return success(sports)


@router.get("/{sport_id}", summary="Get sport by ID")
async def get_sport(
    sport_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    sid = _sport_id(sport_id)
    try:
        sport = await SportRepository(session).get_sport(sid)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch sport %s", sid)
        raise InternalFailure("Failed to fetch sport", error=str(e)) from e
    if sport is None:
        raise NotFound("Sport not found")
    return success(sport)


@router.get("/{sport_id}/teams", summary="List a sport's teams")
async def get_sport_teams(
    sport_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    sid = _sport_id(sport_id)
    try:
        teams = await TeamRepository(session).list_by_sport(sid)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch teams for sport %s", sid)
        raise InternalFailure("Failed to fetch teams by sport", error=str(e)) from e
    return success(teams)


@router.get("/{sport_id}/matches", summary="List a sport's matches")
async def get_sport_matches(
    sport_id: str,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    """GET /api/v1/sports/{id}/matches?limit&offset -> paginated matches of the sport (404 if unknown)."""
    sid = _sport_id(sport_id)
    try:
        sport = await SportRepository(session).get_sport(sid)
        if sport is None:
            raise NotFound("Sport not found")
        filters = build_match_filters(
            {"sport": sport["name"], "limit": limit, "offset": offset},
            message="Invalid pagination",
        )
        matches, pagination = await list_matches_page(session, filters)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch matches for sport %s", sid)
        raise InternalFailure("Failed to fetch matches by sport", error=str(e)) from e
    return success(matches, pagination)

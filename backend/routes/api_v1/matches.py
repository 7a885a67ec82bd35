"""Matches API: filtered/paginated list, single match, by sport, by status."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from core.errors import InternalFailure, NotFound, ValidationFailed
from core.validation import MATCH_STATUSES, parse_int, validate_id
from repositories.match_repo import MatchRepository
from services.match_service import build_match_filters, list_matches_page
from .envelope import success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "",
    summary="List matches",
    description="Filter by sport (case-insensitive), status, team and date; paginate with limit (1-100, default 10) and offset.",
)
async def get_matches(
    sport: Optional[str] = None,
    status: Optional[str] = None,
    team: Optional[str] = None,
    date: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    """GET /api/v1/matches -> { data: Match[], pagination: {total, limit, offset, hasMore} }."""
    filters = build_match_filters(
        {
            "sport": sport,
            "status": status,
            "team": team,
            "date": date,
            "limit": limit,
            "offset": offset,
        }
    )
    try:
        matches, pagination = await list_matches_page(session, filters)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch matches")
        raise InternalFailure("Failed to fetch matches", error=str(e)) from e
    return success(matches, pagination)


@router.get("/sport/{sport_name}", summary="List matches by sport name")
async def get_matches_by_sport(
    sport_name: str,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    """Unknown sport names yield an empty list, not 404. The segment is matched as given."""
    filters = build_match_filters(
        {"limit": limit, "offset": offset},
        message="Invalid pagination",
    )
    filters.sport = sport_name
    try:
        matches, pagination = await list_matches_page(session, filters)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch matches for sport %r", sport_name)
        raise InternalFailure("Failed to fetch matches by sport", error=str(e)) from e
    return success(matches, pagination)


@router.get("/status/{status}", summary="List matches by status")
async def get_matches_by_status(
    status: str,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    if status not in MATCH_STATUSES:
        raise ValidationFailed(
            "Invalid status. Must be one of: " + ", ".join(MATCH_STATUSES)
        )
    filters = build_match_filters(
        {"status": status, "limit": limit, "offset": offset},
        message="Invalid pagination",
    )
    try:
        matches, pagination = await list_matches_page(session, filters)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch matches for status %s", status)
        raise InternalFailure("Failed to fetch matches by status", error=str(e)) from e
    return success(matches, pagination)


@router.get("/{match_id}", summary="Get match by ID")
async def get_match(
    match_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    validation = validate_id(match_id)
    if not validation.is_valid:
        raise ValidationFailed("Invalid match ID", errors=validation.errors)
    mid = parse_int(match_id)
    try:
        match = await MatchRepository(session).get_match(mid)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch match %s", mid)
        raise InternalFailure("Failed to fetch match", error=str(e)) from e
    if match is None:
        raise NotFound("Match not found")
    return success(match)

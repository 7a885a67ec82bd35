"""Teams API: list teams, one team, and the matches it plays in."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from core.errors import InternalFailure, NotFound, ValidationFailed
from core.validation import parse_int, validate_id
from repositories.team_repo import TeamRepository
from services.match_service import build_match_filters, list_matches_page
from .envelope import success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"])


def _team_id(raw: str) -> int:
    validation = validate_id(raw)
    if not validation.is_valid:
        raise ValidationFailed("Invalid team ID", errors=validation.errors)
    return parse_int(raw)


@router.get("", summary="List teams")
async def get_teams(session: AsyncSession = Depends(get_db_session)) -> dict:
    """GET /api/v1/teams -> every team with its sport name, ordered by sport then name."""
    try:
        teams = await TeamRepository(session).list_teams()
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch teams")
        raise InternalFailure("Failed to fetch teams", error=str(e)) from e
    return success(teams)


@router.get("/{team_id}", summary="Get team by ID")
async def get_team(
    team_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    tid = _team_id(team_id)
    try:
        team = await TeamRepository(session).get_team(tid)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch team %s", tid)
        raise InternalFailure("Failed to fetch team", error=str(e)) from e
    if team is None:
        raise NotFound("Team not found")
    return success(team)


@router.get("/{team_id}/matches", summary="List a team's matches")
async def get_team_matches(
    team_id: str,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    """GET /api/v1/teams/{id}/matches?limit&offset -> matches where the team plays home or away."""
    tid = _team_id(team_id)
    try:
        team = await TeamRepository(session).get_team(tid)
        if team is None:
            raise NotFound("Team not found")
        filters = build_match_filters(
            {"team": tid, "limit": limit, "offset": offset},
            message="Invalid pagination",
        )
        matches, pagination = await list_matches_page(session, filters)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch matches for team %s", tid)
        raise InternalFailure("Failed to fetch matches by team", error=str(e)) from e
    return success(matches, pagination)

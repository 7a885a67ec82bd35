from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.sport import Sport
from models.team import Team
from .base import BaseRepository, Row, fits_integer_column


def _team_select() -> Select:
    """Teams joined to their sport name."""
    return select(
        Team.id,
        Team.name,
        Team.sport_id,
        Sport.name.label("sport_name"),
        Team.logo_url,
        Team.created_at,
    ).join(Sport, Team.sport_id == Sport.id)


class TeamRepository(BaseRepository[Team]):
    """Repository for Team rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_teams(self) -> List[Row]:
        """All teams ordered by sport name, then team name."""
        stmt = _team_select().order_by(Sport.name.asc(), Team.name.asc())
        return await self.fetch_rows(stmt)

    async def get_team(self, team_id: int) -> Optional[Row]:
        if not fits_integer_column(team_id):
            return None
        stmt = _team_select().where(Team.id == team_id)
        return await self.fetch_row(stmt)

    async def list_by_sport(self, sport_id: int) -> List[Row]:
        if not fits_integer_column(sport_id):
            return []
        stmt = _team_select().where(Team.sport_id == sport_id).order_by(Team.name.asc())
        return await self.fetch_rows(stmt)

    async def list_by_sport_name(self, sport_name: str) -> List[Row]:
        """Teams of a sport, sport name matched case-insensitively."""
        stmt = (
            _team_select()
            .where(func.lower(Sport.name) == func.lower(sport_name))
            .order_by(Team.name.asc())
        )
        return await self.fetch_rows(stmt)

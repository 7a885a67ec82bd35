from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from sqlalchemy import Select, false, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from models.match import Match
from models.sport import Sport
from models.team import Team
from .base import SQL_INTEGER_MAX, BaseRepository, Row, fits_integer_column

HomeTeam = aliased(Team, name="home_team")
AwayTeam = aliased(Team, name="away_team")


@dataclass
class MatchFilters:
    """Optional match list filters. ``None`` (or a falsy value) means "not applied"."""

    sport: Optional[str] = None
    status: Optional[str] = None
    team_id: Optional[int] = None
    match_date: Optional[date] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


def _match_select() -> Select:
    """Matches joined to sport and both teams, one denormalized row per match."""
    return (
        select(
            Match.id,
            Match.sport_id,
            Sport.name.label("sport_name"),
            Match.home_team_id,
            HomeTeam.name.label("home_team_name"),
            Match.away_team_id,
            AwayTeam.name.label("away_team_name"),
            Match.match_date,
            Match.status,
            Match.home_score,
            Match.away_score,
            Match.created_at,
        )
        .join(Sport, Match.sport_id == Sport.id)
        .join(HomeTeam, Match.home_team_id == HomeTeam.id)
        .join(AwayTeam, Match.away_team_id == AwayTeam.id)
    )


def _day_bounds(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def _apply_conditions(stmt: Select, filters: MatchFilters) -> Select:
    """AND together every supplied filter; shared by the list and count queries.

    ``sport`` is applied whenever it is not None, so an empty or blank name
    matches nothing rather than everything.
    """
    if filters.sport is not None:
        stmt = stmt.where(func.lower(Sport.name) == func.lower(filters.sport))
    if filters.status:
        stmt = stmt.where(Match.status == filters.status)
    if filters.team_id and not fits_integer_column(filters.team_id):
        # no stored id can be that large
        stmt = stmt.where(false())
    elif filters.team_id:
        stmt = stmt.where(
            or_(
                Match.home_team_id == filters.team_id,
                Match.away_team_id == filters.team_id,
            )
        )
    if filters.match_date:
        start, end = _day_bounds(filters.match_date)
        stmt = stmt.where(Match.match_date >= start).where(Match.match_date < end)
    return stmt


class MatchRepository(BaseRepository[Match]):
    """Repository for Match rows (denormalized with sport and team names)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    def build_list_query(self, filters: MatchFilters) -> Select:
        """Filtered, date-ordered match query.

        LIMIT is applied only when ``limit`` is set; OFFSET only when LIMIT is
        applied as well and ``offset`` is non-zero.
        """
        stmt = _apply_conditions(_match_select(), filters)
        stmt = stmt.order_by(Match.match_date.asc(), Match.id.asc())
        if filters.limit:
            stmt = stmt.limit(filters.limit)
            if filters.offset:
                stmt = stmt.offset(min(filters.offset, SQL_INTEGER_MAX))
        return stmt

    def build_count_query(self, filters: MatchFilters) -> Select:
        """Count with the same WHERE clause as the list query; limit/offset ignored."""
        stmt = (
            select(func.count(Match.id))
            .select_from(Match)
            .join(Sport, Match.sport_id == Sport.id)
        )
        return _apply_conditions(stmt, filters)

    async def list_matches(self, filters: Optional[MatchFilters] = None) -> List[Row]:
        return await self.fetch_rows(self.build_list_query(filters or MatchFilters()))

    async def count_matches(self, filters: Optional[MatchFilters] = None) -> int:
        result = await self.session.execute(
            self.build_count_query(filters or MatchFilters())
        )
        return int(result.scalar_one())

    async def get_match(self, match_id: int) -> Optional[Row]:
        if not fits_integer_column(match_id):
            return None
        stmt = _match_select().where(Match.id == match_id)
        return await self.fetch_row(stmt)


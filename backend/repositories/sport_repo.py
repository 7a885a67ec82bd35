from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.sport import Sport
from .base import BaseRepository, Row, fits_integer_column

_SPORT_COLUMNS = (Sport.id, Sport.name, Sport.description, Sport.created_at)


class SportRepository(BaseRepository[Sport]):
    """Repository for Sport rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_sports(self) -> List[Row]:
        """All sports ordered by name."""
        stmt = select(*_SPORT_COLUMNS).order_by(Sport.name.asc())
        return await self.fetch_rows(stmt)

    async def get_sport(self, sport_id: int) -> Optional[Row]:
        if not fits_integer_column(sport_id):
            return None
        stmt = select(*_SPORT_COLUMNS).where(Sport.id == sport_id)
        return await self.fetch_row(stmt)

    async def get_sport_by_name(self, name: str) -> Optional[Row]:
        """Case-insensitive lookup by name."""
        stmt = select(*_SPORT_COLUMNS).where(func.lower(Sport.name) == func.lower(name))
        return await self.fetch_row(stmt)

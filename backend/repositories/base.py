from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import Base

T = TypeVar("T", bound=Base)

Row = Dict[str, Any]

# SQLite INTEGER is a signed 64-bit value
SQL_INTEGER_MAX = 2**63 - 1


def fits_integer_column(value: int) -> bool:
    """False for ids the driver cannot bind; such ids cannot exist in the table."""
    return -SQL_INTEGER_MAX - 1 <= value <= SQL_INTEGER_MAX


def _isoformat(value: Any) -> Any:
    """Datetimes come back from SQLite naive; they were stored as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return value


def to_row(mapping: Any) -> Row:
    """Convert a result mapping into a JSON-ready dict."""
    return {key: _isoformat(value) for key, value in dict(mapping).items()}


class BaseRepository(Generic[T]):
    """Base repository with common read helpers.

    No commits are performed here - commit responsibility is left to the
    session owner (request dependency or seed).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with an async session."""
        self.session = session

    async def fetch_rows(self, stmt: Select) -> List[Row]:
        """Execute a select and return every row as a dict."""
        result = await self.session.execute(stmt)
        return [to_row(m) for m in result.mappings().all()]

    async def fetch_row(self, stmt: Select) -> Optional[Row]:
        """Execute a select and return the first row as a dict, or None."""
        result = await self.session.execute(stmt)
        mapping = result.mappings().first()
        return to_row(mapping) if mapping is not None else None


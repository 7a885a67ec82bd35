from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import DatabaseManager


def get_database(request: Request) -> DatabaseManager:
    """Return the DatabaseManager owned by the running application."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding an AsyncSession from the app's DatabaseManager."""
    manager = get_database(request)
    async with manager.session() as session:
        yield session

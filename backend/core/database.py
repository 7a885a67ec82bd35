"""
Async engine/session ownership for the API.

One DatabaseManager per application, handed to ``create_app`` and kept on
``app.state.database``. Requests, the seed CLI and tests all open sessions
through it.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import event, text
from sqlalchemy.engine.interfaces import DBAPIConnection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from models import Base

logger = logging.getLogger(__name__)

_NOT_READY = "Database is not initialized; call init() first"


def _apply_sqlite_pragmas(dbapi_connection: DBAPIConnection, _record: object) -> None:  # pragma: no cover
    """Enforce foreign keys (cascades) and prefer WAL on file databases."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


class DatabaseManager:
    """Lazily created AsyncEngine plus its session factory."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def _require_engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError(_NOT_READY)
        return self._engine

    async def init(self) -> None:
        """Create the engine once; later calls are no-ops."""
        if self._engine is not None:
            return
        engine = create_async_engine(self.database_url, echo=False)
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _apply_sqlite_pragmas)
        self._engine = engine
        self._session_factory = async_sessionmaker(engine, expire_on_commit=False)
        logger.info("Database engine ready (%s)", engine.url.render_as_string(hide_password=True))

    async def create_tables(self) -> None:
        """CREATE TABLE IF NOT EXISTS for every model on Base."""
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")

    async def ping(self) -> bool:
        """SELECT 1; raises when the database cannot be reached."""
        async with self._require_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Unit of work: commit when the block exits cleanly, roll back on error."""
        if self._session_factory is None:
            raise RuntimeError(_NOT_READY)
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            await session.commit()

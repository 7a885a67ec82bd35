import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.database import DatabaseManager
from core.errors import register_exception_handlers
from core.logging import setup_logging
from routes.api_v1 import api_v1_router
from seed.seed_reference import seed_reference_data

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[DatabaseManager] = None,
) -> FastAPI:
    """Build the FastAPI app around one explicitly owned DatabaseManager.

    The manager lives on ``app.state.database``; routes reach it through
    ``core.dependencies.get_db_session``.
    """
    settings = settings or get_settings()
    database = database or DatabaseManager(settings.database_url)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    register_exception_handlers(app)
    app.include_router(api_v1_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        """Open the database, create tables and seed reference data.

        Any failure here aborts startup before connections are accepted.
        """
        await database.init()
        await database.create_tables()
        if settings.seed_on_startup:
            async with database.session() as session:
                counts = await seed_reference_data(session)
            logger.info("Seed complete: %s", counts)
        logger.info("CORS allow_origins=%s", [settings.frontend_url])
        logger.info("Application startup complete")

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        """Application shutdown hook."""
        await database.dispose()
        logger.info("Application shutdown complete")

    return app


settings = get_settings()
setup_logging(settings)

app = create_app(settings)

# Ensure backend is at sys.path[0] when pytest runs (from repo root or from backend dir)
import sys
from datetime import datetime, timezone
from pathlib import Path

_tests_dir = Path(__file__).resolve().parent
_backend = _tests_dir.parent
_str_backend = str(_backend)
if sys.path[0:1] != [_str_backend]:
    sys.path.insert(0, _str_backend)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from core.database import DatabaseManager
from models import Match, Sport, Team

MEMORY_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_settings(**overrides) -> Settings:
    values = {
        "env": "test",
        "database_url": MEMORY_DB_URL,
        "log_level": "WARNING",
        "seed_on_startup": False,
    }
    values.update(overrides)
    return Settings(**values)


def _utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


# Deterministic fixture data: 3 sports (Tennis has no matches), 6 teams, 5 matches.
SPORT_ROWS = [
    {"id": 1, "name": "Football", "description": "American Football"},
    {"id": 2, "name": "Basketball", "description": "Basketball"},
    {"id": 3, "name": "Tennis", "description": None},
]

TEAM_ROWS = [
    {"id": 1, "name": "Kansas City Chiefs", "sport_id": 1},
    {"id": 2, "name": "Buffalo Bills", "sport_id": 1},
    {"id": 3, "name": "Dallas Cowboys", "sport_id": 1},
    {"id": 4, "name": "Los Angeles Lakers", "sport_id": 2},
    {"id": 5, "name": "Boston Celtics", "sport_id": 2},
    {"id": 6, "name": "Miami Heat", "sport_id": 2},
]

MATCH_ROWS = [
    {"id": 1, "sport_id": 1, "home_team_id": 1, "away_team_id": 2, "match_date": _utc(2030, 1, 10, 20), "status": "scheduled"},
    {"id": 2, "sport_id": 1, "home_team_id": 3, "away_team_id": 1, "match_date": _utc(2030, 1, 11, 18, 30), "status": "completed", "home_score": 17, "away_score": 24},
    {"id": 3, "sport_id": 2, "home_team_id": 4, "away_team_id": 5, "match_date": _utc(2030, 1, 12, 19, 30), "status": "scheduled"},
    {"id": 4, "sport_id": 2, "home_team_id": 6, "away_team_id": 4, "match_date": _utc(2030, 1, 12, 22), "status": "in_progress", "home_score": 50, "away_score": 48},
    {"id": 5, "sport_id": 2, "home_team_id": 5, "away_team_id": 6, "match_date": _utc(2030, 1, 14, 0, 30), "status": "scheduled"},
]


async def insert_fixture_rows(manager: DatabaseManager) -> None:
    async with manager.session() as session:
        session.add_all([Sport(**row) for row in SPORT_ROWS])
        await session.flush()
        session.add_all([Team(**row) for row in TEAM_ROWS])
        await session.flush()
        session.add_all([Match(**row) for row in MATCH_ROWS])


@pytest_asyncio.fixture
async def empty_db():
    """In-memory database with tables created and no rows."""
    manager = DatabaseManager(MEMORY_DB_URL)
    await manager.init()
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest_asyncio.fixture
async def test_db(empty_db: DatabaseManager):
    """In-memory database holding SPORT_ROWS, TEAM_ROWS and MATCH_ROWS."""
    await insert_fixture_rows(empty_db)
    return empty_db


@pytest_asyncio.fixture
async def client(test_db: DatabaseManager):
    """httpx client bound to an app that owns ``test_db``."""
    from main import create_app

    app = create_app(make_settings(), database=test_db)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

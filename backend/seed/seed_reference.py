"""
Reference data seeded at startup: sports, teams, upcoming matches and users.
Upsert by primary key inside the caller's session, so one seed is one transaction.
Match dates are relative to "now" at fixed local times.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from core.security import hash_password
from models.match import MATCH_STATUS_SCHEDULED, Match
from models.prediction import Prediction
from models.sport import Sport
from models.team import Team
from models.user import User

logger = logging.getLogger(__name__)

SPORTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Football", "description": "American Football"},
    {"id": 2, "name": "Basketball", "description": "Basketball"},
    {"id": 3, "name": "Soccer", "description": "Association Football"},
    {"id": 4, "name": "Baseball", "description": "Major League Baseball"},
    {"id": 5, "name": "Hockey", "description": "Ice Hockey"},
]

TEAMS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Kansas City Chiefs", "sport_id": 1, "logo_url": "https://example.com/chiefs.png"},
    {"id": 2, "name": "Buffalo Bills", "sport_id": 1, "logo_url": "https://example.com/bills.png"},
    {"id": 3, "name": "Dallas Cowboys", "sport_id": 1, "logo_url": "https://example.com/cowboys.png"},
    {"id": 4, "name": "Green Bay Packers", "sport_id": 1, "logo_url": "https://example.com/packers.png"},
    {"id": 5, "name": "Los Angeles Lakers", "sport_id": 2, "logo_url": "https://example.com/lakers.png"},
    {"id": 6, "name": "Boston Celtics", "sport_id": 2, "logo_url": "https://example.com/celtics.png"},
    {"id": 7, "name": "Golden State Warriors", "sport_id": 2, "logo_url": "https://example.com/warriors.png"},
    {"id": 8, "name": "Miami Heat", "sport_id": 2, "logo_url": "https://example.com/heat.png"},
    {"id": 9, "name": "Manchester City", "sport_id": 3, "logo_url": "https://example.com/mancity.png"},
    {"id": 10, "name": "Arsenal", "sport_id": 3, "logo_url": "https://example.com/arsenal.png"},
    {"id": 11, "name": "Liverpool", "sport_id": 3, "logo_url": "https://example.com/liverpool.png"},
    {"id": 12, "name": "Chelsea", "sport_id": 3, "logo_url": "https://example.com/chelsea.png"},
]

# (id, sport_id, home_team_id, away_team_id, days_from_today, hour, minute), local time
MATCH_SCHEDULE: List[tuple] = [
    (1, 1, 1, 2, 0, 20, 0),
    (2, 1, 3, 4, 1, 18, 30),
    (3, 1, 2, 3, 2, 21, 0),
    (4, 2, 5, 6, 3, 19, 30),
    (5, 2, 7, 8, 4, 22, 0),
    (6, 2, 6, 7, 5, 20, 0),
    (7, 3, 9, 10, 6, 15, 0),
    (8, 3, 11, 12, 7, 17, 30),
    (9, 3, 10, 11, 8, 20, 0),
    (10, 3, 12, 9, 9, 16, 0),
]

ADMIN_USER: Dict[str, Any] = {"id": 1, "username": "admin", "email": "admin@example.com", "password": "admin"}

# Dev-only accounts; all share the password "password".
GENERATED_USER_NAMES: List[tuple] = [
    ("Avery", "Brooks"),
    ("Jordan", "Castillo"),
    ("Riley", "Donovan"),
    ("Morgan", "Ellis"),
    ("Casey", "Fischer"),
    ("Quinn", "Garrido"),
    ("Taylor", "Hughes"),
    ("Jamie", "Iverson"),
    ("Rowan", "Jensen"),
]
GENERATED_USER_PASSWORD = "password"


def game_date(now: datetime, days_from_today: int, hour: int, minute: int) -> datetime:
    """Local wall-clock time ``days_from_today`` after ``now``, returned in UTC."""
    local_now = now.astimezone()
    local = (local_now + timedelta(days=days_from_today)).replace(
        hour=hour, minute=minute, second=0, microsecond=0
    )
    return local.astimezone(timezone.utc)


def build_matches(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or datetime.now(timezone.utc)
    return [
        {
            "id": mid,
            "sport_id": sport_id,
            "home_team_id": home,
            "away_team_id": away,
            "match_date": game_date(now, days, hour, minute),
            "status": MATCH_STATUS_SCHEDULED,
            "home_score": 0,
            "away_score": 0,
        }
        for mid, sport_id, home, away, days, hour, minute in MATCH_SCHEDULE
    ]


def build_users() -> List[Dict[str, Any]]:
    users = [
        {
            "id": ADMIN_USER["id"],
            "username": ADMIN_USER["username"],
            "email": ADMIN_USER["email"],
            "password_hash": hash_password(ADMIN_USER["password"]),
        }
    ]
    for offset, (first, last) in enumerate(GENERATED_USER_NAMES, start=2):
        users.append({
            "id": offset,
            "username": f"{first}.{last}".lower(),
            "email": f"{first}.{last}@example.com".lower(),
            "password_hash": hash_password(GENERATED_USER_PASSWORD),
        })
    return users


async def seed_reference_data(
    session: AsyncSession,
    now: Optional[datetime] = None,
) -> Dict[str, int]:
    """
    Upsert sports, teams, matches and users. Existing rows with the same id
    are replaced (match dates move with "now"). Returns per-table counts.
    Nothing is committed here; the session owner commits or rolls back.
    """
    counts = {"sports": 0, "teams": 0, "matches": 0, "users": 0}

    for row in SPORTS:
        await session.merge(Sport(**row))
        counts["sports"] += 1
    await session.flush()

    for row in TEAMS:
        await session.merge(Team(**row))
        counts["teams"] += 1
    await session.flush()

    for row in build_matches(now):
        await session.merge(Match(**row))
        counts["matches"] += 1

    for row in build_users():
        await session.merge(User(**row))
        counts["users"] += 1

    await session.flush()
    logger.info("Seeded reference data: %s", counts)
    return counts


async def clear_reference_data(session: AsyncSession) -> None:
    """Delete predictions, matches, teams, users and the seeded sports."""
    await session.execute(delete(Prediction))
    await session.execute(delete(Match))
    await session.execute(delete(Team))
    await session.execute(delete(User))
    await session.execute(delete(Sport).where(Sport.id.in_([s["id"] for s in SPORTS])))
    logger.info("Cleared reference data")

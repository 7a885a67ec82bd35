"""Repository layer for DB access only (simple parameterized queries).

Repositories accept an AsyncSession explicitly and return plain dict rows
ready for JSON. No business logic, no commits.
"""

from .base import BaseRepository
from .match_repo import MatchFilters, MatchRepository
from .sport_repo import SportRepository
from .team_repo import TeamRepository

__all__ = [
    "BaseRepository",
    "MatchFilters",
    "MatchRepository",
    "SportRepository",
    "TeamRepository",
]

"""SQLAlchemy models for sports, teams, matches, users and server-side predictions.

Importing this package registers every table on ``Base.metadata``.
"""

from .base import Base
from .match import Match
from .prediction import Prediction
from .sport import Sport
from .team import Team
from .user import User

__all__ = [
    "Base",
    "Match",
    "Prediction",
    "Sport",
    "Team",
    "User",
]

"""Password hashing for user records (salted PBKDF2-SHA256 via werkzeug)."""

from __future__ import annotations

import logging
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from .config import get_settings

logger = logging.getLogger(__name__)

DEV_ITERATIONS = 1_000
PRODUCTION_ITERATIONS = 600_000


def work_factor(env: str) -> int:
    """PBKDF2 iteration count for an environment name."""
    if env.strip().lower() == "production":
        return PRODUCTION_ITERATIONS
    return DEV_ITERATIONS


def _hash_method() -> str:
    return f"pbkdf2:sha256:{work_factor(get_settings().env)}"


def hash_password(password: Any) -> str:
    """Return a salted hash of ``password``. Raises TypeError for non-string input."""
    if not isinstance(password, str):
        raise TypeError("Password must be a valid string")
    return generate_password_hash(password, method=_hash_method())


def verify_password(password: Any, password_hash: Any) -> bool:
    """Compare ``password`` against a stored hash.

    Never raises: malformed input or an unreadable hash compares as False.
    """
    if not isinstance(password, str) or not isinstance(password_hash, str):
        return False
    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError) as e:
        logger.debug("Password hash comparison failed: %s", e)
        return False

"""
Input validation for list filters and path ids.
Pure functions: no DB access, no sanitization beyond type/range checks.
String filters go straight into bound query parameters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, List, Mapping, Optional

MATCH_STATUSES = ("scheduled", "in_progress", "completed")

LIMIT_MIN = 1
LIMIT_MAX = 100
SPORT_NAME_MAX_LENGTH = 50

_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors))


def parse_int(value: Any) -> Optional[int]:
    """Strict integer parse: ints (not bools) or optionally signed decimal strings. None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if _INT_RE.match(stripped):
            return int(stripped)
    return None


def parse_int_safely(value: Any, default: int = 0) -> int:
    parsed = parse_int(value)
    return default if parsed is None else parsed


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date (``YYYY-MM-DD``) or datetime string into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def is_valid_date(value: Any) -> bool:
    return parse_date(value) is not None


def sanitize_string(value: str) -> str:
    """Trim and drop angle brackets."""
    return value.strip().replace("<", "").replace(">", "")


def validate_match_filters(filters: Mapping[str, Any]) -> ValidationResult:
    """Check match list filters; returns every violated rule, in a stable order."""
    errors: List[str] = []

    sport = filters.get("sport")
    if sport and not isinstance(sport, str):
        errors.append("Sport filter must be a string")

    status = filters.get("status")
    if status and status not in MATCH_STATUSES:
        errors.append("Status must be one of: " + ", ".join(MATCH_STATUSES))

    team = filters.get("team")
    if team is not None and team != "":
        team_id = parse_int(team)
        if team_id is None or team_id < 1:
            errors.append("Team must be a positive integer ID")

    match_date = filters.get("date")
    if match_date and not is_valid_date(match_date):
        errors.append("Date must be a valid date (YYYY-MM-DD)")

    if filters.get("limit") is not None:
        limit = parse_int(filters["limit"])
        if limit is None or limit < LIMIT_MIN or limit > LIMIT_MAX:
            errors.append(f"Limit must be a number between {LIMIT_MIN} and {LIMIT_MAX}")

    if filters.get("offset") is not None:
        offset = parse_int(filters["offset"])
        if offset is None or offset < 0:
            errors.append("Offset must be a non-negative number")

    return ValidationResult.from_errors(errors)


def validate_id(value: Any) -> ValidationResult:
    parsed = parse_int(value)
    if parsed is None or parsed < 1:
        return ValidationResult.from_errors(["ID must be a positive integer"])
    return ValidationResult()


def validate_status(value: Any) -> ValidationResult:
    if value not in MATCH_STATUSES:
        return ValidationResult.from_errors(
            ["Status must be one of: " + ", ".join(MATCH_STATUSES)]
        )
    return ValidationResult()


def validate_sport_name(name: Any) -> ValidationResult:
    errors: List[str] = []
    if not name or not isinstance(name, str) or not name.strip():
        errors.append("Sport name must be a non-empty string")
    if isinstance(name, str) and len(name) > SPORT_NAME_MAX_LENGTH:
        errors.append(f"Sport name must be {SPORT_NAME_MAX_LENGTH} characters or less")
    return ValidationResult.from_errors(errors)

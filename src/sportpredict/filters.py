"""
Client-side match filtering and ordering.
Input rows have the API's match shape (sport_name, home_team_name, away_team_name, match_date, ...).
Synchronous, no IO.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

ALL = "all"
DATE_RANGE_TODAY = "today"
DATE_RANGE_WEEK = "week"
DATE_RANGES = (ALL, DATE_RANGE_TODAY, DATE_RANGE_WEEK)

MatchRow = Dict[str, Any]


def parse_match_date(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (``Z`` suffix accepted). None when unparsable."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def _localize(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    """Express ``dt`` in ``tz``; naive values are taken to already be in ``tz``."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now().astimezone()
    if now.tzinfo is None:
        return now.astimezone()
    return now


def current_week_bounds(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Monday 00:00 through Sunday 23:59:59.999999 of the week containing ``now``."""
    now = _resolve_now(now)
    week_start = (now - timedelta(days=now.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    week_end = week_start + timedelta(days=7) - timedelta(microseconds=1)
    return week_start, week_end


def _passes_date_range(match: MatchRow, date_range: str, now: datetime) -> bool:
    raw = match.get("match_date")
    if not raw or date_range == ALL:
        return True
    parsed = parse_match_date(raw)
    if parsed is None:
        logger.warning("Invalid match date: %r", raw)
        return False
    local = _localize(parsed, now.tzinfo)
    if date_range == DATE_RANGE_TODAY:
        return local.date() == now.date()
    if date_range == DATE_RANGE_WEEK:
        week_start, week_end = current_week_bounds(now)
        return week_start <= local <= week_end
    return True


def _passes_search(match: MatchRow, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    home = (match.get("home_team_name") or "").lower()
    away = (match.get("away_team_name") or "").lower()
    return needle in home or needle in away


def _compare_by_date(tz: Optional[tzinfo]):
    def compare(a: MatchRow, b: MatchRow) -> int:
        raw_a, raw_b = a.get("match_date"), b.get("match_date")
        if not raw_a and not raw_b:
            return 0
        if not raw_a:
            return 1
        if not raw_b:
            return -1
        date_a, date_b = parse_match_date(raw_a), parse_match_date(raw_b)
        if date_a is None or date_b is None:
            return 0
        date_a, date_b = _localize(date_a, tz), _localize(date_b, tz)
        if date_a < date_b:
            return -1
        if date_a > date_b:
            return 1
        return 0

    return compare


def filter_matches(
    matches: Sequence[MatchRow],
    sport: str = ALL,
    date_range: str = ALL,
    search: str = "",
    now: Optional[datetime] = None,
) -> List[MatchRow]:
    """
    Keep matches that satisfy every criterion, ordered by match date ascending.

    - sport: "all" or the exact sport_name.
    - date_range: "all", "today" (same calendar day as now) or "week"
      (current Monday-start week). Undated matches pass; unparsable dates are
      dropped from "today"/"week".
    - search: case-insensitive substring of either team name.

    Undated matches sort last; pairs with an unparsable date compare equal and
    keep their input order.
    """
    now = _resolve_now(now)
    kept = [
        match
        for match in matches
        if (sport == ALL or match.get("sport_name") == sport)
        and _passes_date_range(match, date_range, now)
        and _passes_search(match, search)
    ]
    return sorted(kept, key=cmp_to_key(_compare_by_date(now.tzinfo)))

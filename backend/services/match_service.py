"""Match listing: filter validation/coercion and paginated list + count."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import ValidationFailed
from core.validation import parse_date, parse_int, validate_match_filters
from repositories.match_repo import MatchFilters, MatchRepository

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


def build_match_filters(
    raw: Mapping[str, Any],
    message: str = "Invalid filters",
) -> MatchFilters:
    """
    Validate raw query values and coerce them into MatchFilters.
    Absent limit/offset fall back to 10/0.
    Raises ValidationFailed with every violated rule.
    """
    validation = validate_match_filters(raw)
    if not validation.is_valid:
        raise ValidationFailed(message, errors=validation.errors)

    limit = parse_int(raw.get("limit")) if raw.get("limit") is not None else DEFAULT_LIMIT
    offset = parse_int(raw.get("offset")) if raw.get("offset") is not None else DEFAULT_OFFSET
    team = raw.get("team")
    return MatchFilters(
        sport=raw.get("sport") or None,
        status=raw.get("status") or None,
        team_id=parse_int(team) if team not in (None, "") else None,
        match_date=parse_date(raw.get("date")) if raw.get("date") else None,
        limit=limit,
        offset=offset,
    )


def pagination_for(
    filters: MatchFilters, returned: int, total: int
) -> Dict[str, Any]:
    offset = filters.offset or 0
    return {
        "total": total,
        "limit": filters.limit,
        "offset": offset,
        "hasMore": offset + returned < total,
    }


async def list_matches_page(
    session: AsyncSession,
    filters: Optional[MatchFilters] = None,
) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    """Run the list query and its count companion; return (rows, pagination)."""
    filters = filters or MatchFilters()
    repo = MatchRepository(session)
    rows = await repo.list_matches(filters)
    total = await repo.count_matches(filters)
    return rows, pagination_for(filters, len(rows), total)

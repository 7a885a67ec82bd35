"""Match list/count query construction and the read repositories."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import ValidationFailed
from repositories.match_repo import MatchFilters, MatchRepository
from repositories.sport_repo import SportRepository
from repositories.team_repo import TeamRepository
from services.match_service import build_match_filters, list_matches_page, pagination_for


def _sql(stmt) -> str:
    return str(stmt).upper()


def test_list_query_without_limit_has_no_limit_or_offset():
    stmt = MatchRepository(None).build_list_query(MatchFilters(offset=5))
    sql = _sql(stmt)
    assert "LIMIT" not in sql
    assert "OFFSET" not in sql
    assert "ORDER BY MATCHES.MATCH_DATE ASC" in sql


def test_list_query_offset_only_with_limit():
    repo = MatchRepository(None)
    assert "OFFSET" not in _sql(repo.build_list_query(MatchFilters(limit=10, offset=0)))
    sql = _sql(repo.build_list_query(MatchFilters(limit=10, offset=20)))
    assert "LIMIT" in sql
    assert "OFFSET" in sql


def test_list_query_joins_sport_and_both_teams():
    sql = _sql(MatchRepository(None).build_list_query(MatchFilters()))
    assert "JOIN SPORTS" in sql
    assert "AS HOME_TEAM" in sql
    assert "AS AWAY_TEAM" in sql


def test_count_query_shares_conditions_and_ignores_paging():
    filters = MatchFilters(sport="Soccer", status="scheduled", limit=5, offset=10)
    sql = _sql(MatchRepository(None).build_count_query(filters))
    assert "COUNT(MATCHES.ID)" in sql
    assert "LOWER(SPORTS.NAME)" in sql
    assert "MATCHES.STATUS" in sql
    assert "LIMIT" not in sql
    assert "OFFSET" not in sql


def test_build_match_filters_defaults_and_coercion():
    filters = build_match_filters({"sport": "", "team": "4", "date": "2030-01-12"})
    assert filters == MatchFilters(
        sport=None, status=None, team_id=4, match_date=date(2030, 1, 12), limit=10, offset=0
    )


def test_build_match_filters_raises_with_all_errors():
    with pytest.raises(ValidationFailed) as exc_info:
        build_match_filters({"limit": "0", "offset": "-1"}, message="Invalid pagination")
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Invalid pagination"
    assert len(exc_info.value.errors) == 2


def test_pagination_has_more():
    filters = MatchFilters(limit=10, offset=20)
    assert pagination_for(filters, 10, 31)["hasMore"] is True
    assert pagination_for(filters, 10, 30)["hasMore"] is False
    assert pagination_for(MatchFilters(), 0, 0) == {"total": 0, "limit": None, "offset": 0, "hasMore": False}


@pytest.mark.asyncio
async def test_count_ignores_limit(test_db):
    async with test_db.session() as session:
        rows, pagination = await list_matches_page(session, MatchFilters(limit=2, offset=1))
    assert [r["id"] for r in rows] == [2, 3]
    assert pagination == {"total": 5, "limit": 2, "offset": 1, "hasMore": True}


@pytest.mark.asyncio
async def test_list_without_limit_returns_everything(test_db):
    async with test_db.session() as session:
        rows = await MatchRepository(session).list_matches()
    assert len(rows) == 5


@pytest.mark.asyncio
async def test_sport_and_team_lookups_by_name(test_db):
    async with test_db.session() as session:
        sport = await SportRepository(session).get_sport_by_name("fOoTbAlL")
        teams = await TeamRepository(session).list_by_sport_name("BASKETBALL")
        missing = await SportRepository(session).get_sport_by_name("Curling")
    assert sport["id"] == 1
    assert [t["name"] for t in teams] == ["Boston Celtics", "Los Angeles Lakers", "Miami Heat"]
    assert missing is None


def test_empty_sport_is_still_a_condition():
    sql = _sql(MatchRepository(None).build_count_query(MatchFilters(sport="")))
    assert "LOWER(SPORTS.NAME)" in sql


@pytest.mark.asyncio
async def test_out_of_range_ids_do_not_reach_the_driver(test_db):
    huge = 10**20
    async with test_db.session() as session:
        assert await MatchRepository(session).get_match(huge) is None
        assert await SportRepository(session).get_sport(huge) is None
        assert await TeamRepository(session).get_team(huge) is None
        assert await TeamRepository(session).list_by_sport(huge) == []
        rows, pagination = await list_matches_page(session, MatchFilters(team_id=huge, limit=10, offset=huge))
    assert rows == []
    assert pagination["total"] == 0

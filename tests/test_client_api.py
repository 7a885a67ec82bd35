"""API client against httpx.MockTransport: envelope unwrapping, params, error mapping."""

from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

_root = Path(__file__).resolve().parent.parent
_src = _root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from sportpredict.api import ApiError, MatchesApi

BASE_URL = "http://api.test"


def _api(handler) -> MatchesApi:
    return MatchesApi(base_url=BASE_URL, transport=httpx.MockTransport(handler))


def test_get_matches_returns_data_and_drops_empty_params() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"success": True, "data": [{"id": 1}], "pagination": {"total": 1}})

    with _api(handler) as api:
        data = api.get_matches(sport="Soccer", status="", team=None, limit=5, offset=0)
    assert data == [{"id": 1}]
    assert seen["path"] == "/api/v1/matches"
    assert seen["params"] == {"sport": "Soccer", "limit": "5"}


def test_path_segments_are_url_encoded() -> None:
    paths = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path.decode())
        return httpx.Response(200, json={"success": True, "data": []})

    with _api(handler) as api:
        api.get_matches_by_sport("Ice Hockey/NHL")
        api.get_matches_by_status("in_progress", limit=2)
        api.get_match(42)
    assert paths == [
        "/api/v1/matches/sport/Ice%20Hockey%2FNHL",
        "/api/v1/matches/status/in_progress?limit=2",
        "/api/v1/matches/42",
    ]


def test_error_uses_json_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"success": False, "message": "Match not found"})

    with _api(handler) as api:
        with pytest.raises(ApiError) as exc_info:
            api.get_match(999)
    assert exc_info.value.message == "Match not found"
    assert exc_info.value.status == 404


def test_error_without_json_message_uses_status_line() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"detail": "down"})

    with _api(handler) as api:
        with pytest.raises(ApiError, match="HTTP 503: Service Unavailable"):
            api.get_matches()


def test_error_with_text_body_uses_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway upstream")

    with _api(handler) as api:
        with pytest.raises(ApiError, match="Bad gateway upstream"):
            api.get_matches()


def test_timeout_maps_to_retry_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with _api(handler) as api:
        with pytest.raises(ApiError, match="Request timeout - please try again") as exc_info:
            api.get_matches()
    assert exc_info.value.status is None


def test_connection_failure_maps_to_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _api(handler) as api:
        with pytest.raises(ApiError, match="^Network error: connection refused"):
            api.get_matches()


def test_base_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPORTPREDICT_API_BASE_URL", "http://env.test/")
    api = MatchesApi(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"data": []})))
    assert api.base_url == "http://env.test"
    api.close()


def test_missing_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPORTPREDICT_API_BASE_URL", raising=False)
    with pytest.raises(ApiError, match="API base URL is not configured"):
        MatchesApi()

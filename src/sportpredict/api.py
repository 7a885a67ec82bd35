"""
HTTP client for the Sports Prediction API (``/api/v1``).
One attempt per call, fixed 10 s timeout, no retry.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

API_BASE_URL_ENV = "SPORTPREDICT_API_BASE_URL"
REQUEST_TIMEOUT_SECONDS = 10.0


class ApiError(Exception):
    """Failed API call. ``status`` is the HTTP status when a response arrived."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _error_message(response: httpx.Response) -> str:
    message = f"HTTP {response.status_code}: {response.reason_phrase}"
    text = response.text
    try:
        body = response.json()
    except ValueError:
        return text if text.strip() else message
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return message


def _params(**values: Any) -> Dict[str, str]:
    """Drop falsy values; the API treats absent and empty filters the same."""
    return {key: str(value) for key, value in values.items() if value}


class MatchesApi:
    """Read-only access to the matches endpoints.

    Usable as a context manager; ``close()`` releases the underlying client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        base_url = base_url or os.environ.get(API_BASE_URL_ENV)
        if not base_url:
            raise ApiError("API base URL is not configured")
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> "MatchesApi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Any:
        """GET ``endpoint`` and return the envelope's ``data``."""
        try:
            response = self._client.get(endpoint, params=params or None)
        except httpx.TimeoutException as e:
            raise ApiError("Request timeout - please try again") from e
        except httpx.HTTPError as e:
            raise ApiError(f"Network error: {e}") from e

        if response.is_error:
            raise ApiError(_error_message(response), response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise ApiError("Invalid JSON in API response", response.status_code) from e
        return body.get("data") if isinstance(body, dict) else body

    def get_matches(
        self,
        sport: Optional[str] = None,
        status: Optional[str] = None,
        team: Optional[int] = None,
        date: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            return self._get(
                "/api/v1/matches",
                _params(sport=sport, status=status, team=team, date=date, limit=limit, offset=offset),
            )
        except ApiError as e:
            logger.error("Failed to fetch matches: %s", e)
            raise

    def get_matches_by_sport(
        self,
        sport: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            return self._get(
                f"/api/v1/matches/sport/{quote(sport, safe='')}",
                _params(limit=limit, offset=offset),
            )
        except ApiError as e:
            logger.error("Failed to fetch matches for sport %s: %s", sport, e)
            raise

    def get_matches_by_status(
        self,
        status: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            return self._get(
                f"/api/v1/matches/status/{quote(status, safe='')}",
                _params(limit=limit, offset=offset),
            )
        except ApiError as e:
            logger.error("Failed to fetch matches for status %s: %s", status, e)
            raise

    def get_match(self, match_id: Union[int, str]) -> Dict[str, Any]:
        try:
            return self._get(f"/api/v1/matches/{quote(str(match_id), safe='')}")
        except ApiError as e:
            logger.error("Failed to fetch match %s: %s", match_id, e)
            raise

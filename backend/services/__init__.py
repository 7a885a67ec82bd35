"""Services: composition layer between routes and repositories."""

from .match_service import build_match_filters, list_matches_page

__all__ = [
    "build_match_filters",
    "list_matches_page",
]

"""Implied decimal odds and probability formatting."""

from __future__ import annotations

NO_ODDS = "—"


def calculate_implied_odds(probability: float) -> str:
    """
    Decimal odds implied by a win probability given as a percentage (0-100):
    odds = 100 / probability, two decimals. Zero probability has no odds.
    """
    if probability == 0:
        return NO_ODDS
    return f"{100 / probability:.2f}"


def format_probability(probability: float) -> str:
    """58.2 -> "58%"."""
    return f"{probability:.0f}%"

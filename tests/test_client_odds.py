"""Implied odds and probability formatting."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parent.parent
_src = _root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from sportpredict.odds import NO_ODDS, calculate_implied_odds, format_probability


@pytest.mark.parametrize(
    "probability, expected",
    [(50, "2.00"), (100, "1.00"), (25, "4.00"), (33, "3.03"), (1, "100.00"), (0, NO_ODDS)],
)
def test_calculate_implied_odds(probability, expected):
    assert calculate_implied_odds(probability) == expected


def test_zero_probability_has_no_odds():
    assert calculate_implied_odds(0) == "—"
    assert calculate_implied_odds(0.0) == "—"


def test_format_probability_rounds_to_whole_percent():
    assert format_probability(58.2) == "58%"
    assert format_probability(66.6) == "67%"
    assert format_probability(0) == "0%"

"""
Terminal client for the Sports Prediction API.

  sportpredict matches [--sport NAME] [--date-range all|today|week] [--search TEXT] [--status S]
  sportpredict predict MATCH_ID PROBABILITY
  sportpredict clear MATCH_ID
  sportpredict predictions

Predictions are stored locally (see SPORTPREDICT_STORAGE_PATH); matches come from
SPORTPREDICT_API_BASE_URL.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from .api import ApiError, MatchesApi
from .filters import ALL, DATE_RANGES, filter_matches, parse_match_date
from .odds import calculate_implied_odds, format_probability
from .storage import LocalStorage, Prediction, PredictionBook


def _format_match_date(raw: Any) -> str:
    parsed = parse_match_date(raw)
    if parsed is None:
        return "TBD"
    return parsed.astimezone().strftime("%a %d %b %Y %H:%M")


def format_match_line(match: Dict[str, Any], prediction: Optional[Prediction] = None) -> str:
    """One line per match: id, sport, teams, kickoff, and the local prediction if any."""
    line = (
        f"#{match.get('id')} [{match.get('sport_name', '?')}] "
        f"{match.get('home_team_name', '?')} vs {match.get('away_team_name', '?')} "
        f"- {_format_match_date(match.get('match_date'))} ({match.get('status', '?')})"
    )
    if prediction is not None:
        line += (
            f" | {format_probability(prediction.team_a)} / {format_probability(prediction.team_b)}"
            f" (odds {calculate_implied_odds(prediction.team_a)} / {calculate_implied_odds(prediction.team_b)})"
        )
    return line


def _cmd_matches(args: argparse.Namespace, book: PredictionBook) -> int:
    with MatchesApi(base_url=args.api_url) as api:
        matches: List[Dict[str, Any]] = api.get_matches(status=args.status) or []
    shown = filter_matches(
        matches,
        sport=args.sport,
        date_range=args.date_range,
        search=args.search,
    )
    if not shown:
        print("No matches found.")
        return 0
    for match in shown:
        print(format_match_line(match, book.get(match.get("id"))))
    return 0


def _cmd_predict(args: argparse.Namespace, book: PredictionBook) -> int:
    try:
        prediction = book.save_prediction(args.match_id, args.probability)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(
        f"Saved prediction for match {args.match_id}: "
        f"{format_probability(prediction.team_a)} / {format_probability(prediction.team_b)}"
    )
    return 0


def _cmd_clear(args: argparse.Namespace, book: PredictionBook) -> int:
    book.clear_prediction(args.match_id)
    print(f"Cleared prediction for match {args.match_id}")
    return 0


def _cmd_predictions(args: argparse.Namespace, book: PredictionBook) -> int:
    predictions = book.predictions
    if not predictions:
        print("No predictions saved.")
        return 0
    for match_id in sorted(predictions, key=lambda k: (len(k), k)):
        p = predictions[match_id]
        print(
            f"#{match_id}: {format_probability(p.team_a)} / {format_probability(p.team_b)} "
            f"(odds {calculate_implied_odds(p.team_a)} / {calculate_implied_odds(p.team_b)})"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sportpredict", description="Browse matches and record predictions")
    parser.add_argument("--api-url", default=None, help="API base URL (default: $SPORTPREDICT_API_BASE_URL)")
    parser.add_argument("--storage", default=None, help="Prediction storage file")
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "WARNING"))
    sub = parser.add_subparsers(dest="command", required=True)

    p_matches = sub.add_parser("matches", help="List matches")
    p_matches.add_argument("--sport", default=ALL, help="Exact sport name or 'all'")
    p_matches.add_argument("--date-range", default=ALL, choices=DATE_RANGES)
    p_matches.add_argument("--search", default="", help="Substring of either team name")
    p_matches.add_argument("--status", default=None, help="Server-side status filter")
    p_matches.set_defaults(func=_cmd_matches)

    p_predict = sub.add_parser("predict", help="Save a win probability for the home team")
    p_predict.add_argument("match_id")
    p_predict.add_argument("probability", type=float)
    p_predict.set_defaults(func=_cmd_predict)

    p_clear = sub.add_parser("clear", help="Remove a saved prediction")
    p_clear.add_argument("match_id")
    p_clear.set_defaults(func=_cmd_clear)

    p_list = sub.add_parser("predictions", help="Show saved predictions with implied odds")
    p_list.set_defaults(func=_cmd_predictions)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    book = PredictionBook(LocalStorage(args.storage))
    try:
        return args.func(args, book)
    except ApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Client side of the sports prediction app: API client, match filtering, odds and local predictions."""

from .api import ApiError, MatchesApi
from .filters import filter_matches
from .odds import calculate_implied_odds, format_probability
from .storage import LocalStorage, Prediction, PredictionBook, load_predictions, save_predictions

__all__ = [
    "ApiError",
    "MatchesApi",
    "filter_matches",
    "calculate_implied_odds",
    "format_probability",
    "LocalStorage",
    "Prediction",
    "PredictionBook",
    "load_predictions",
    "save_predictions",
]

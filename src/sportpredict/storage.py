"""
Local prediction store.

Predictions live only on this machine: one JSON blob under ``STORAGE_KEY``
mapping match id -> {"teamA": p, "teamB": 100 - p}. Nothing is sent to the API.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

STORAGE_KEY = "sportpredict-predictions"
STORAGE_PATH_ENV = "SPORTPREDICT_STORAGE_PATH"

PROBABILITY_MIN = 0.0
PROBABILITY_MAX = 100.0


def default_storage_path() -> Path:
    env_path = os.environ.get(STORAGE_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path.home() / ".sportpredict" / "local_storage.json"


class LocalStorage:
    """String key/value store persisted as a single JSON object on disk."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else default_storage_path()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.is_file():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Write one key. An unreadable store file is replaced by a fresh one."""
        try:
            data = self._read_all()
        except ValueError as e:
            logger.warning("Discarding unreadable storage file %s: %s", self.path, e)
            data = {}
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


@dataclass(frozen=True)
class Prediction:
    """Win-probability split for one match, in percent; team_b == 100 - team_a."""

    team_a: float
    team_b: float

    @classmethod
    def from_team_a(cls, team_a: float) -> "Prediction":
        return cls(team_a=team_a, team_b=100 - team_a)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Prediction":
        return cls(team_a=float(data["teamA"]), team_b=float(data["teamB"]))

    def to_dict(self) -> Dict[str, float]:
        return {"teamA": self.team_a, "teamB": self.team_b}


def load_predictions(storage: LocalStorage) -> Dict[str, Prediction]:
    """Read the prediction map; unreadable or corrupt data yields an empty map."""
    try:
        stored = storage.get_item(STORAGE_KEY)
        if not stored:
            return {}
        raw = json.loads(stored)
        return {str(match_id): Prediction.from_dict(value) for match_id, value in raw.items()}
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Failed to load predictions from storage: %s", e)
        return {}


def save_predictions(storage: LocalStorage, predictions: Dict[str, Prediction]) -> None:
    """Write the whole prediction map; write failures are logged."""
    payload = {match_id: p.to_dict() for match_id, p in predictions.items()}
    try:
        storage.set_item(STORAGE_KEY, json.dumps(payload))
    except (OSError, ValueError) as e:
        logger.error("Failed to save predictions to storage: %s", e)


class PredictionBook:
    """In-memory prediction map loaded once from storage and persisted after every change."""

    def __init__(self, storage: Optional[LocalStorage] = None) -> None:
        self.storage = storage or LocalStorage()
        self._predictions: Dict[str, Prediction] = load_predictions(self.storage)

    @property
    def predictions(self) -> Dict[str, Prediction]:
        return dict(self._predictions)

    def get(self, match_id: Union[int, str]) -> Optional[Prediction]:
        return self._predictions.get(str(match_id))

    def save_prediction(self, match_id: Union[int, str], team_a: float) -> Prediction:
        """Store team_a's probability for a match; team_b is its complement."""
        if math.isnan(team_a):
            raise ValueError("Please enter a valid number")
        if team_a < PROBABILITY_MIN or team_a > PROBABILITY_MAX:
            raise ValueError("Probability must be between 0 and 100")
        prediction = Prediction.from_team_a(team_a)
        self._predictions[str(match_id)] = prediction
        save_predictions(self.storage, self._predictions)
        return prediction

    def clear_prediction(self, match_id: Union[int, str]) -> None:
        self._predictions.pop(str(match_id), None)
        save_predictions(self.storage, self._predictions)

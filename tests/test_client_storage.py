"""Local prediction store: persistence, complement rule, corrupt data, validation."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parent.parent
_src = _root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from sportpredict.storage import (
    STORAGE_KEY,
    LocalStorage,
    Prediction,
    PredictionBook,
    load_predictions,
)


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "store" / "local_storage.json")


def test_save_stores_complement_and_persists(storage: LocalStorage) -> None:
    book = PredictionBook(storage)
    prediction = book.save_prediction(7, 65)
    assert prediction == Prediction(team_a=65, team_b=35)

    reloaded = PredictionBook(storage)
    assert reloaded.get("7") == Prediction(team_a=65.0, team_b=35.0)
    assert reloaded.get(7) == reloaded.get("7")


def test_stored_blob_uses_team_a_team_b_keys(storage: LocalStorage) -> None:
    PredictionBook(storage).save_prediction(3, 40)
    raw = json.loads(storage.get_item(STORAGE_KEY))
    assert raw == {"3": {"teamA": 40, "teamB": 60}}


def test_overwrite_and_clear(storage: LocalStorage) -> None:
    book = PredictionBook(storage)
    book.save_prediction(1, 10)
    book.save_prediction(2, 20)
    book.save_prediction(1, 90)
    assert book.get(1).team_b == 10

    book.clear_prediction(1)
    book.clear_prediction(99)
    assert set(PredictionBook(storage).predictions) == {"2"}


@pytest.mark.parametrize("value", [-1, 100.5, 250])
def test_out_of_range_is_rejected(storage: LocalStorage, value: float) -> None:
    book = PredictionBook(storage)
    with pytest.raises(ValueError, match="Probability must be between 0 and 100"):
        book.save_prediction(1, value)
    assert book.predictions == {}


def test_nan_is_rejected(storage: LocalStorage) -> None:
    with pytest.raises(ValueError, match="Please enter a valid number"):
        PredictionBook(storage).save_prediction(1, float("nan"))


def test_bounds_are_inclusive(storage: LocalStorage) -> None:
    book = PredictionBook(storage)
    assert book.save_prediction(1, 0) == Prediction(0, 100)
    assert book.save_prediction(2, 100) == Prediction(100, 0)


def test_missing_file_loads_empty(storage: LocalStorage) -> None:
    assert load_predictions(storage) == {}


def test_corrupt_blob_loads_empty(storage: LocalStorage) -> None:
    storage.set_item(STORAGE_KEY, "{not json")
    assert load_predictions(storage) == {}
    assert PredictionBook(storage).predictions == {}


def test_corrupt_storage_file_is_replaced_on_save(tmp_path: Path) -> None:
    path = tmp_path / "local_storage.json"
    path.write_text("garbage", encoding="utf-8")
    storage = LocalStorage(path)
    book = PredictionBook(storage)
    assert book.predictions == {}
    book.save_prediction(5, 55)
    assert book.get(5) == Prediction(55, 45)

    reloaded = PredictionBook(LocalStorage(path))
    assert reloaded.get(5) == Prediction(55, 45)
    assert json.loads(path.read_text(encoding="utf-8"))[STORAGE_KEY]


def test_local_storage_keeps_other_keys(storage: LocalStorage) -> None:
    storage.set_item("theme", "dark")
    PredictionBook(storage).save_prediction(1, 50)
    assert storage.get_item("theme") == "dark"
    storage.remove_item("theme")
    assert storage.get_item("theme") is None


def test_storage_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "env_store.json"
    monkeypatch.setenv("SPORTPREDICT_STORAGE_PATH", str(target))
    PredictionBook(LocalStorage()).save_prediction(9, 30)
    assert target.is_file()

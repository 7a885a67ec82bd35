"""Password hashing: salted hashes, verification, malformed input."""

from __future__ import annotations

import pytest

from core.security import (
    DEV_ITERATIONS,
    PRODUCTION_ITERATIONS,
    hash_password,
    verify_password,
    work_factor,
)


def test_same_password_hashes_differently():
    first = hash_password("hunter2")
    second = hash_password("hunter2")
    assert first != second
    assert first.startswith("pbkdf2:sha256:")
    assert verify_password("hunter2", first)
    assert verify_password("hunter2", second)


def test_verify_round_trip():
    stored = hash_password("correct horse")
    assert verify_password("correct horse", stored) is True
    assert verify_password("wrong horse", stored) is False


def test_empty_password_can_be_hashed():
    stored = hash_password("")
    assert verify_password("", stored) is True


@pytest.mark.parametrize(
    "password, stored",
    [
        (None, "pbkdf2:sha256:1000$salt$abc"),
        ("secret", None),
        ("secret", ""),
        ("secret", "not-a-hash"),
        (123, "pbkdf2:sha256:1000$salt$abc"),
    ],
)
def test_verify_never_raises_on_malformed_input(password, stored):
    assert verify_password(password, stored) is False


@pytest.mark.parametrize("bad", [None, 42, b"bytes"])
def test_hash_rejects_non_string(bad):
    with pytest.raises(TypeError, match="Password must be a valid string"):
        hash_password(bad)


def test_work_factor_depends_on_environment():
    assert work_factor("production") == PRODUCTION_ITERATIONS
    assert work_factor(" Production ") == PRODUCTION_ITERATIONS
    assert work_factor("development") == DEV_ITERATIONS
    assert work_factor("test") == DEV_ITERATIONS

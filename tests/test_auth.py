"""Tests for request signing."""

import pytest

from api import auth
from api.auth import build_auth_args, create_signature
from exceptions import ClockError


def test_signature_vector():
    assert create_signature("secret", "message") == (
        "8b5f48702995c1598c573db1e21866a9b825d4a794d169d7060a03605796360b"
    )


def test_auth_args(monkeypatch):
    monkeypatch.setattr(auth, "get_timestamp_ms", lambda: 1_000)

    api_key, expires, signature = build_auth_args("key", "secret")

    assert api_key == "key"
    assert expires == "11000"
    assert signature == create_signature("secret", "GET/realtime11000")


def test_auth_args_custom_window(monkeypatch):
    monkeypatch.setattr(auth, "get_timestamp_ms", lambda: 5)
    assert build_auth_args("key", "secret", expires_window_ms=0)[1] == "5"


def test_auth_args_clock_failure(monkeypatch):
    def broken_clock():
        raise ClockError("clock unavailable")

    monkeypatch.setattr(auth, "get_timestamp_ms", broken_clock)

    with pytest.raises(ClockError):
        build_auth_args("key", "secret")

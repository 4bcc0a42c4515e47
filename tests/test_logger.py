"""Tests for logger setup."""

import logging

from logger import resolve_level, setup_logger


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level(None) == logging.INFO
    assert resolve_level("not-a-level") == logging.INFO


def test_setup_logger_is_idempotent():
    first = setup_logger("test_logger_idempotent", level="WARNING")
    handlers = list(first.handlers)
    second = setup_logger("test_logger_idempotent")

    assert first is second
    assert second.handlers == handlers
    assert second.level == logging.WARNING
    assert not second.propagate

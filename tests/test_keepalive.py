"""Tests for the ping generator."""

import json
import time

from exceptions import ClockError
from ws_client import keepalive
from ws_client.keepalive import KeepAlive, op_ping, timestamp_ping


def wait_for_ping(ka, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        payload = ka.poll()
        if payload is not None:
            return payload
        time.sleep(0.01)
    return None


def test_op_ping_payload():
    assert op_ping() == '{"op":"ping"}'


def test_timestamp_ping_payload(monkeypatch):
    monkeypatch.setattr(keepalive, "get_timestamp_ms", lambda: 1672304486868)
    assert timestamp_ping() == '{"ping":1672304486868}'
    assert json.loads(timestamp_ping()) == {"ping": 1672304486868}


def test_poll_is_empty_before_start():
    ka = KeepAlive(60)
    assert ka.poll() is None
    assert not ka.is_running()


def test_first_ping_is_immediate():
    ka = KeepAlive(60)
    ka.start()
    try:
        assert wait_for_ping(ka) == '{"op":"ping"}'
        assert ka.is_running()
    finally:
        ka.stop()


def test_emits_repeatedly():
    ka = KeepAlive(0.02)
    ka.start()
    try:
        assert wait_for_ping(ka) is not None
        assert wait_for_ping(ka) is not None
    finally:
        ka.stop()


def test_stop_wakes_thread():
    ka = KeepAlive(60)
    ka.start()
    started = time.monotonic()
    ka.stop()
    assert time.monotonic() - started < 1.0
    assert not ka.is_running()


def test_clock_error_skips_tick():
    def broken_payload():
        raise ClockError("clock unavailable")

    ka = KeepAlive(0.01, broken_payload)
    ka.start()
    try:
        time.sleep(0.05)
        assert ka.poll() is None
        assert ka.is_running()
    finally:
        ka.stop()

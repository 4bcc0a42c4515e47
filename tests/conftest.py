"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Dict

import pytest
import websocket as ws


class FakeConnection:
    """
    Scripted stand-in for websocket.WebSocket.

    Each scripted item is either an (opcode, data) tuple, an exception instance
    to raise, or a callable whose return value is used in its place. Once the
    script is exhausted a close frame is returned, or a read timeout when
    ``idle`` is set.
    """

    def __init__(self, frames=None, idle=False):
        self.frames = list(frames or [])
        self.idle = idle
        self.sent = []
        self.timeout = None
        self.closed = False
        self.send_error = None

    def settimeout(self, timeout):
        self.timeout = timeout

    def send(self, payload):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(payload)

    def recv_data(self, control_frame=False):
        if not self.frames:
            if self.idle:
                raise ws.WebSocketTimeoutException("timed out")
            return ws.ABNF.OPCODE_CLOSE, b""
        item = self.frames.pop(0)
        if callable(item):
            item = item()
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self.closed = True

    def sent_json(self, include_pings=False):
        messages = [json.loads(payload) for payload in self.sent]
        if include_pings:
            return messages
        return [m for m in messages if m != {"op": "ping"} and "ping" not in m]


class FakeConnector:
    """Records connection attempts and hands out a FakeConnection."""

    def __init__(self, connection=None, error=None):
        self.connection = connection or FakeConnection()
        self.error = error
        self.calls = []

    def __call__(self, uri, timeout=None, **options):
        self.calls.append({"uri": uri, "timeout": timeout, "options": options})
        if self.error is not None:
            raise self.error
        return self.connection


def text(payload: Any):
    """Encode a payload as an inbound text frame."""
    if not isinstance(payload, (str, bytes)):
        payload = json.dumps(payload)
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return ws.ABNF.OPCODE_TEXT, payload


@pytest.fixture
def encode_frame():
    return text


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def connector(fake_connection) -> FakeConnector:
    return FakeConnector(fake_connection)


@pytest.fixture
def orderbook_snapshot() -> Dict[str, Any]:
    return {
        "topic": "orderbook.50.BTCUSDT",
        "type": "snapshot",
        "ts": 1672304484978,
        "data": {
            "s": "BTCUSDT",
            "b": [["16493.50", "0.006"], ["16493.00", "0.100"]],
            "a": [["16611.00", "0.029"], ["16612.00", "0.213"]],
            "u": 18521288,
            "seq": 7961638724,
        },
    }


@pytest.fixture
def orderbook_delta() -> Dict[str, Any]:
    return {
        "topic": "orderbook.50.BTCUSDT",
        "type": "delta",
        "ts": 1672304484980,
        "data": {
            "s": "BTCUSDT",
            "b": [["16493.50", "0"], ["16494.00", "1.5"]],
            "a": [["16611.00", "0.5"], ["16610.50", "0.2"]],
            "u": 18521289,
            "seq": 7961638725,
        },
    }


@pytest.fixture
def trade_frame() -> Dict[str, Any]:
    return {
        "topic": "publicTrade.BTCUSDT",
        "type": "snapshot",
        "ts": 1672304486868,
        "data": [
            {
                "T": 1672304486865,
                "s": "BTCUSDT",
                "S": "Buy",
                "v": "0.001",
                "p": "16578.50",
                "L": "PlusTick",
                "i": "20f43950-d8dd-5b31-9112-a178eb6023af",
                "BT": False,
            }
        ],
    }


@pytest.fixture
def spot_ticker_frame() -> Dict[str, Any]:
    return {
        "topic": "tickers.BTCUSDT",
        "ts": 1673853746003,
        "type": "snapshot",
        "cs": 2588407389,
        "data": {
            "symbol": "BTCUSDT",
            "lastPrice": "21109.77",
            "highPrice24h": "21426.99",
            "lowPrice24h": "20575",
            "prevPrice24h": "20704.93",
            "volume24h": "6780.866843",
            "turnover24h": "141946527.22907118",
            "price24hPcnt": "0.0196",
            "usdIndexPrice": "21120.2400136",
        },
    }


@pytest.fixture
def kline_frame() -> Dict[str, Any]:
    return {
        "topic": "kline.5.BTCUSDT",
        "type": "snapshot",
        "ts": 1672324988882,
        "data": [
            {
                "start": 1672324800000,
                "end": 1672325099999,
                "interval": "5",
                "open": "16649.5",
                "close": "16677",
                "high": "16677",
                "low": "16608",
                "volume": "2.081",
                "turnover": "34666.4005",
                "confirm": False,
                "timestamp": 1672324988882,
            }
        ],
    }


@pytest.fixture
def wallet_frame() -> Dict[str, Any]:
    return {
        "id": "5923240c6880ab-c59f-420b-aa46-3f4bdf2e3e12",
        "topic": "wallet",
        "creationTime": 1672364262474,
        "data": [
            {
                "accountIMRate": "0.016",
                "accountMMRate": "0.003",
                "totalEquity": "12837.78330098",
                "totalWalletBalance": "12840.4045924",
                "totalMarginBalance": "12837.78330188",
                "totalAvailableBalance": "12632.05767702",
                "totalPerpUPL": "-2.62129051",
                "totalInitialMargin": "205.72562486",
                "totalMaintenanceMargin": "39.42876721",
                "coin": [
                    {
                        "coin": "USDC",
                        "equity": "200.62572554",
                        "usdValue": "200.62572554",
                        "walletBalance": "201.34882644",
                        "availableToWithdraw": "0",
                        "availableToBorrow": "1500000",
                        "borrowAmount": "0",
                        "accruedInterest": "0",
                        "totalOrderIM": "0",
                        "totalPositionIM": "202.99874213",
                        "totalPositionMM": "39.14289747",
                        "unrealisedPnl": "74.2768991",
                        "cumRealisedPnl": "-209.1544627",
                    }
                ],
                "accountType": "UNIFIED",
            }
        ],
    }


@pytest.fixture
def op_pong_frame() -> Dict[str, Any]:
    return {
        "success": True,
        "ret_msg": "pong",
        "conn_id": "0970e817-426e-429a-a679-ff7f55e0b16a",
        "op": "ping",
    }

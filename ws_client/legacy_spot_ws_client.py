"""
舊版現貨 WebSocket 客戶端（v1 行情、v2 行情、私有頻道）

與 V5 協議的區別：
    - 每個訂閱單獨發送一條請求，不做批量
    - 心跳為 {"ping": 毫秒時間戳}，間隔 30 秒
    - 讀超時 15 秒
"""
from __future__ import annotations

from typing import Any, Dict

from config import (
    MAINNET_LEGACY_SPOT,
    MAINNET_LEGACY_SPOT_PRIVATE,
    MAINNET_LEGACY_SPOT_V2,
    TESTNET_LEGACY_SPOT,
    TESTNET_LEGACY_SPOT_PRIVATE,
    TESTNET_LEGACY_SPOT_V2,
)

from .base_ws_client import LegacyClientBuilder, LegacyWebSocketClient, require_credentials
from .keepalive import timestamp_ping
from .legacy_responses import LEGACY_SPOT_DECODER, LEGACY_SPOT_PRIVATE_DECODER, LEGACY_SPOT_V2_DECODER
from .responses import ResponseDecoder


class LegacySpotWebSocketClient(LegacyWebSocketClient):
    """
    現貨 v1 公共行情客戶端

    回調收到的消息類型見 legacy_responses.LegacySpotResponse。
    """

    def get_market_name(self) -> str:
        return "LegacySpot"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_SPOT_DECODER

    def _add(self, topic: str, symbol: str, params: Dict[str, Any]):
        request = {"topic": topic, "event": "sub", "symbol": symbol, "params": params}
        self._add_request(request, f"{topic}.{symbol}")

    def subscribe_trade(self, symbol: str, binary: bool = False):
        self._add("trade", symbol, {"binary": binary})

    def subscribe_realtimes(self, symbol: str, binary: bool = False):
        self._add("realtimes", symbol, {"binary": binary})

    def subscribe_kline(self, symbol: str, kline_type: str, binary: bool = False):
        """訂閱K線，kline_type 如 1m、1h、1d"""
        self._add(f"kline_{kline_type}", symbol, {"binary": binary})

    def subscribe_depth(self, symbol: str, binary: bool = False):
        self._add("depth", symbol, {"binary": binary})

    def subscribe_merged_depth(self, symbol: str, binary: bool, dump_scale: int):
        self._add("mergedDepth", symbol, {"binary": binary, "dumpScale": dump_scale})

    def subscribe_diff_depth(self, symbol: str, binary: bool = False):
        self._add("diffDepth", symbol, {"binary": binary})

    def subscribe_lt(self, symbol: str, binary: bool = False):
        """訂閱槓桿代幣淨值，symbol 需帶 NAV 後綴"""
        self._add("lt", symbol, {"binary": binary})


class LegacySpotV2WebSocketClient(LegacyWebSocketClient):
    """
    現貨 v2 公共行情客戶端

    交易對放在 params 裡；回調收到的消息類型見 legacy_responses.LegacySpotV2Response。
    """

    def get_market_name(self) -> str:
        return "LegacySpotV2"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_SPOT_V2_DECODER

    def _add(self, topic: str, params: Dict[str, Any]):
        request = {"topic": topic, "event": "sub", "params": params}
        self._add_request(request, f"{topic}.{params['symbol']}")

    def subscribe_depth(self, symbol: str, binary: bool = False):
        self._add("depth", {"binary": binary, "symbol": symbol})

    def subscribe_kline(self, symbol: str, binary: bool, kline_type: str):
        self._add("kline", {"binary": binary, "symbol": symbol, "klineType": kline_type})

    def subscribe_trade(self, symbol: str, binary: bool = False):
        self._add("trade", {"binary": binary, "symbol": symbol})

    def subscribe_book_ticker(self, symbol: str, binary: bool = False):
        self._add("bookTicker", {"binary": binary, "symbol": symbol})

    def subscribe_realtimes(self, symbol: str, binary: bool = False):
        self._add("realtimes", {"binary": binary, "symbol": symbol})


class LegacySpotPrivateWebSocketClient(LegacyWebSocketClient):
    """
    現貨私有頻道客戶端

    認證後服務端自動推送賬戶、訂單和成交事件，無需訂閱。
    """

    def get_market_name(self) -> str:
        return "LegacySpotPrivate"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_SPOT_PRIVATE_DECODER


class LegacySpotWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_SPOT
    TESTNET_URI = TESTNET_LEGACY_SPOT
    ping_payload = staticmethod(timestamp_ping)

    def build(self) -> LegacySpotWebSocketClient:
        return LegacySpotWebSocketClient(self._config(), connector=self._connector)


class LegacySpotV2WebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_SPOT_V2
    TESTNET_URI = TESTNET_LEGACY_SPOT_V2
    ping_payload = staticmethod(timestamp_ping)

    def build(self) -> LegacySpotV2WebSocketClient:
        return LegacySpotV2WebSocketClient(self._config(), connector=self._connector)


class LegacySpotPrivateWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_SPOT_PRIVATE
    TESTNET_URI = TESTNET_LEGACY_SPOT_PRIVATE
    ping_payload = staticmethod(timestamp_ping)

    def build_with_credentials(self, api_key: str, secret: str) -> LegacySpotPrivateWebSocketClient:
        """使用 API key 和 secret 構建私有客戶端"""
        return LegacySpotPrivateWebSocketClient(
            self._config(),
            credentials=require_credentials(api_key, secret),
            connector=self._connector,
        )

"""
舊版 USDT 永續 WebSocket 客戶端

訂閱請求為 {"op": "subscribe", "args": ["topic.SYMBOL", ...]}，每次 subscribe_* 調用發送一條；
心跳為 {"op": "ping"}，間隔 30 秒。
"""
from __future__ import annotations

from typing import Sequence

from config import (
    MAINNET_LEGACY_LINEAR_PRIVATE,
    MAINNET_LEGACY_LINEAR_PUBLIC,
    TESTNET_LEGACY_LINEAR_PRIVATE,
    TESTNET_LEGACY_LINEAR_PUBLIC,
)

from .base_ws_client import LegacyClientBuilder, LegacyWebSocketClient, require_credentials
from .legacy_linear_responses import LEGACY_LINEAR_PRIVATE_DECODER, LEGACY_LINEAR_PUBLIC_DECODER
from .responses import ResponseDecoder


class LegacyFuturePublicClient(LegacyWebSocketClient):
    """舊版合約公共頻道的共同訂閱方法"""

    def _subscribe_symbols(self, topic: str, symbols: Sequence[str]):
        self._add_op_subscription([f"{topic}.{symbol}" for symbol in symbols])

    def subscribe_order_book_l2_25(self, symbols: Sequence[str]):
        self._subscribe_symbols("orderBookL2_25", symbols)

    def subscribe_order_book_l2_200(self, symbols: Sequence[str]):
        self._subscribe_symbols("orderBook_200.100ms", symbols)

    def subscribe_trade(self, symbols: Sequence[str]):
        self._subscribe_symbols("trade", symbols)

    def subscribe_instrument_info(self, symbols: Sequence[str]):
        self._subscribe_symbols("instrument_info.100ms", symbols)

    def subscribe_liquidation(self, symbols: Sequence[str]):
        self._subscribe_symbols("liquidation", symbols)


class LegacyFuturePrivateClient(LegacyWebSocketClient):
    """舊版合約私有頻道的共同訂閱方法，每個頻道單獨一條請求"""

    def subscribe_position(self):
        self._add_op_subscription(["position"])

    def subscribe_execution(self):
        self._add_op_subscription(["execution"])

    def subscribe_order(self):
        self._add_op_subscription(["order"])

    def subscribe_stop_order(self):
        self._add_op_subscription(["stop_order"])

    def subscribe_wallet(self):
        self._add_op_subscription(["wallet"])


class LegacyLinearPublicWebSocketClient(LegacyFuturePublicClient):
    """
    舊版 USDT 永續公共行情客戶端

    回調收到的消息類型見 legacy_linear_responses.LegacyLinearPublicResponse。
    """

    def get_market_name(self) -> str:
        return "LegacyLinearPublic"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_LINEAR_PUBLIC_DECODER

    def subscribe_kline(self, symbols: Sequence[str], interval: str):
        """訂閱K線，interval 如 1、5、D"""
        self._subscribe_symbols(f"candle.{interval}", symbols)


class LegacyLinearPrivateWebSocketClient(LegacyFuturePrivateClient):
    """舊版 USDT 永續私有頻道客戶端"""

    def get_market_name(self) -> str:
        return "LegacyLinearPrivate"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_LINEAR_PRIVATE_DECODER


class LegacyLinearPublicWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_LINEAR_PUBLIC
    TESTNET_URI = TESTNET_LEGACY_LINEAR_PUBLIC

    def build(self) -> LegacyLinearPublicWebSocketClient:
        return LegacyLinearPublicWebSocketClient(self._config(), connector=self._connector)


class LegacyLinearPrivateWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_LINEAR_PRIVATE
    TESTNET_URI = TESTNET_LEGACY_LINEAR_PRIVATE

    def build_with_credentials(self, api_key: str, secret: str) -> LegacyLinearPrivateWebSocketClient:
        """使用 API key 和 secret 構建私有客戶端"""
        return LegacyLinearPrivateWebSocketClient(
            self._config(),
            credentials=require_credentials(api_key, secret),
            connector=self._connector,
        )

"""
舊版反向合約 WebSocket 客戶端

公共與私有頻道共用同一個 realtime 地址，協議與舊版 USDT 永續相同；
K線主題為 klineV2.{interval}，另有保險基金頻道。
"""
from __future__ import annotations

from typing import Sequence

from config import MAINNET_LEGACY_INVERSE, TESTNET_LEGACY_INVERSE

from .base_ws_client import LegacyClientBuilder, require_credentials
from .legacy_inverse_responses import LEGACY_INVERSE_PRIVATE_DECODER, LEGACY_INVERSE_PUBLIC_DECODER
from .legacy_linear_ws_client import LegacyFuturePrivateClient, LegacyFuturePublicClient
from .responses import ResponseDecoder


class LegacyInversePublicWebSocketClient(LegacyFuturePublicClient):
    """
    舊版反向合約公共行情客戶端

    回調收到的消息類型見 legacy_inverse_responses.LegacyInversePublicResponse。
    """

    def get_market_name(self) -> str:
        return "LegacyInversePublic"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_INVERSE_PUBLIC_DECODER

    def subscribe_insurance(self, symbols: Sequence[str]):
        self._subscribe_symbols("insurance", symbols)

    def subscribe_kline(self, symbols: Sequence[str], interval: str):
        self._subscribe_symbols(f"klineV2.{interval}", symbols)


class LegacyInversePrivateWebSocketClient(LegacyFuturePrivateClient):
    """舊版反向合約私有頻道客戶端"""

    def get_market_name(self) -> str:
        return "LegacyInversePrivate"

    def _get_decoder(self) -> ResponseDecoder:
        return LEGACY_INVERSE_PRIVATE_DECODER


class LegacyInversePublicWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_INVERSE
    TESTNET_URI = TESTNET_LEGACY_INVERSE

    def build(self) -> LegacyInversePublicWebSocketClient:
        return LegacyInversePublicWebSocketClient(self._config(), connector=self._connector)


class LegacyInversePrivateWebSocketClientBuilder(LegacyClientBuilder):
    MAINNET_URI = MAINNET_LEGACY_INVERSE
    TESTNET_URI = TESTNET_LEGACY_INVERSE

    def build_with_credentials(self, api_key: str, secret: str) -> LegacyInversePrivateWebSocketClient:
        """使用 API key 和 secret 構建私有客戶端"""
        return LegacyInversePrivateWebSocketClient(
            self._config(),
            credentials=require_credentials(api_key, secret),
            connector=self._connector,
        )

"""
Bybit V5 現貨公共 WebSocket 客戶端
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union

from config import MAINNET_SPOT, TESTNET_SPOT

from .base_ws_client import BaseClientBuilder, BaseWebSocketClient
from .responses import SPOT_DECODER, ResponseDecoder
from .subscriber import KlineInterval


class SpotOrderbookDepth(IntEnum):
    LEVEL1 = 1
    LEVEL50 = 50


class SpotWebSocketClient(BaseWebSocketClient):
    """
    現貨公共頻道客戶端

    回調收到的消息類型見 responses.SpotPublicResponse。
    """

    def get_market_name(self) -> str:
        return "Spot"

    def _get_decoder(self) -> ResponseDecoder:
        return SPOT_DECODER

    def subscribe_orderbook(self, symbol: str, depth: SpotOrderbookDepth):
        self.subscriber.sub_orderbook(symbol, depth)

    def subscribe_trade(self, symbol: str):
        self.subscriber.sub_trade(symbol)

    def subscribe_ticker(self, symbol: str):
        self.subscriber.sub_ticker(symbol)

    def subscribe_kline(self, symbol: str, interval: Union[KlineInterval, str]):
        self.subscriber.sub_kline(symbol, interval)

    def subscribe_lt_kline(self, symbol: str, interval: Union[KlineInterval, str]):
        """訂閱槓桿代幣K線"""
        self.subscriber.sub_lt_kline(symbol, interval)

    def subscribe_lt_ticker(self, symbol: str):
        """訂閱槓桿代幣 ticker"""
        self.subscriber.sub_lt_ticker(symbol)

    def subscribe_lt_nav(self, symbol: str):
        """訂閱槓桿代幣淨值"""
        self.subscriber.sub_lt_nav(symbol)


class SpotWebSocketClientBuilder(BaseClientBuilder):
    MAINNET_URI = MAINNET_SPOT
    TESTNET_URI = TESTNET_SPOT

    def build(self) -> SpotWebSocketClient:
        return SpotWebSocketClient(self._config(), connector=self._connector)

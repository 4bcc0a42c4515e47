"""
Bybit V5 期權公共 WebSocket 客戶端
"""
from __future__ import annotations

from enum import IntEnum

from config import MAINNET_OPTION, TESTNET_OPTION

from .base_ws_client import BaseClientBuilder, BaseWebSocketClient
from .responses import OPTION_DECODER, ResponseDecoder


class OptionOrderbookDepth(IntEnum):
    LEVEL25 = 25
    LEVEL100 = 100


class OptionWebSocketClient(BaseWebSocketClient):
    """
    期權公共頻道客戶端

    回調收到的消息類型見 responses.OptionPublicResponse。
    """

    def get_market_name(self) -> str:
        return "Option"

    def _get_decoder(self) -> ResponseDecoder:
        return OPTION_DECODER

    def subscribe_orderbook(self, symbol: str, depth: OptionOrderbookDepth):
        self.subscriber.sub_orderbook(symbol, depth)

    def subscribe_trade(self, base_coin: str):
        """訂閱最新成交，期權使用基礎幣種，如 BTC"""
        self.subscriber.sub_trade(base_coin)

    def subscribe_ticker(self, symbol: str):
        self.subscriber.sub_ticker(symbol)


class OptionWebSocketClientBuilder(BaseClientBuilder):
    MAINNET_URI = MAINNET_OPTION
    TESTNET_URI = TESTNET_OPTION

    def build(self) -> OptionWebSocketClient:
        return OptionWebSocketClient(self._config(), connector=self._connector)

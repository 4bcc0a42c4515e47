"""
Bybit V5 合約（USDT 永續 / 反向合約）公共 WebSocket 客戶端
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, Union

from config import MAINNET_INVERSE, MAINNET_LINEAR, TESTNET_INVERSE, TESTNET_LINEAR

from .base_ws_client import BaseClientBuilder, BaseWebSocketClient, Connector, WSConnectionConfig
from .responses import FUTURE_DECODER, ResponseDecoder
from .subscriber import KlineInterval


class FutureRole(str, Enum):
    LINEAR = "linear"
    INVERSE = "inverse"


class FutureOrderbookDepth(IntEnum):
    LEVEL1 = 1
    LEVEL50 = 50
    LEVEL200 = 200
    LEVEL500 = 500


class FutureWebSocketClient(BaseWebSocketClient):
    """
    合約公共頻道客戶端

    回調收到的消息類型見 responses.FuturePublicResponse。
    """

    def __init__(self, config: WSConnectionConfig, role: FutureRole = FutureRole.LINEAR,
                 connector: Optional[Connector] = None):
        self.role = role
        super().__init__(config, connector=connector)

    def get_market_name(self) -> str:
        return "Linear" if self.role == FutureRole.LINEAR else "Inverse"

    def _get_decoder(self) -> ResponseDecoder:
        return FUTURE_DECODER

    def subscribe_orderbook(self, symbol: str, depth: FutureOrderbookDepth):
        self.subscriber.sub_orderbook(symbol, depth)

    def subscribe_trade(self, symbol: str):
        self.subscriber.sub_trade(symbol)

    def subscribe_ticker(self, symbol: str):
        self.subscriber.sub_ticker(symbol)

    def subscribe_kline(self, symbol: str, interval: Union[KlineInterval, str]):
        self.subscriber.sub_kline(symbol, interval)

    def subscribe_liquidation(self, symbol: str):
        self.subscriber.sub_liquidation(symbol)


class FutureWebSocketClientBuilder(BaseClientBuilder):
    """合約客戶端構建器，主網/測試網地址取決於合約類型"""

    _URIS = {
        FutureRole.LINEAR: (MAINNET_LINEAR, TESTNET_LINEAR),
        FutureRole.INVERSE: (MAINNET_INVERSE, TESTNET_INVERSE),
    }

    def __init__(self, role: FutureRole = FutureRole.LINEAR):
        self.role = FutureRole(role)
        self.MAINNET_URI, self.TESTNET_URI = self._URIS[self.role]
        super().__init__()

    def build(self) -> FutureWebSocketClient:
        return FutureWebSocketClient(self._config(), role=self.role, connector=self._connector)

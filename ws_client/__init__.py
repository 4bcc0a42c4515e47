# ws_client/__init__.py
"""
WebSocket 模塊，負責 Bybit 實時數據流

使用方式：

    >>> from ws_client import WebSocketApiClient, SpotOrderbookDepth
    >>> client = WebSocketApiClient.spot().build()
    >>> client.subscribe_orderbook("BTCUSDT", SpotOrderbookDepth.LEVEL50)
    >>> client.run(lambda message: print(message))

支持的客戶端:
    - SpotWebSocketClient (V5 現貨)
    - FutureWebSocketClient (V5 USDT 永續 / 反向合約)
    - OptionWebSocketClient (V5 期權)
    - PrivateWebSocketClient (V5 私有頻道)
    - LegacySpotWebSocketClient / LegacySpotV2WebSocketClient (現貨 v1 / v2 行情)
    - LegacySpotPrivateWebSocketClient (現貨私有頻道)
    - LegacyLinearPublicWebSocketClient / LegacyLinearPrivateWebSocketClient (舊版 USDT 永續)
    - LegacyInversePublicWebSocketClient / LegacyInversePrivateWebSocketClient (舊版反向合約)
"""

# 會話引擎與基類
from .base_ws_client import (
    BaseWebSocketClient,
    Credentials,
    SessionState,
    WebSocketSession,
    WSConnectionConfig,
)
from .client import WebSocketApiClient
from .keepalive import KeepAlive
from .orderbook import LocalOrderBook
from .subscriber import KlineInterval, Subscriber

# 具體實現
from .future_ws_client import FutureOrderbookDepth, FutureRole, FutureWebSocketClient
from .legacy_inverse_ws_client import LegacyInversePrivateWebSocketClient, LegacyInversePublicWebSocketClient
from .legacy_linear_ws_client import LegacyLinearPrivateWebSocketClient, LegacyLinearPublicWebSocketClient
from .legacy_spot_ws_client import (
    LegacySpotPrivateWebSocketClient,
    LegacySpotV2WebSocketClient,
    LegacySpotWebSocketClient,
)
from .option_ws_client import OptionOrderbookDepth, OptionWebSocketClient
from .private_ws_client import PrivateWebSocketClient
from .spot_ws_client import SpotOrderbookDepth, SpotWebSocketClient

__all__ = [
    # 基類
    "BaseWebSocketClient",
    "WSConnectionConfig",
    "WebSocketSession",
    "SessionState",
    "Credentials",
    "KeepAlive",
    "Subscriber",
    "KlineInterval",
    "LocalOrderBook",
    # 工廠
    "WebSocketApiClient",
    # 具體實現
    "SpotWebSocketClient",
    "SpotOrderbookDepth",
    "FutureWebSocketClient",
    "FutureOrderbookDepth",
    "FutureRole",
    "OptionWebSocketClient",
    "OptionOrderbookDepth",
    "PrivateWebSocketClient",
    "LegacySpotWebSocketClient",
    "LegacySpotV2WebSocketClient",
    "LegacySpotPrivateWebSocketClient",
    "LegacyLinearPublicWebSocketClient",
    "LegacyLinearPrivateWebSocketClient",
    "LegacyInversePublicWebSocketClient",
    "LegacyInversePrivateWebSocketClient",
]

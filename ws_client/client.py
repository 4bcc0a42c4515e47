"""
WebSocket 客戶端工廠

    >>> client = WebSocketApiClient.spot().testnet().build()
    >>> client.subscribe_orderbook("BTCUSDT", SpotOrderbookDepth.LEVEL50)
    >>> client.run(print)
"""
from .future_ws_client import FutureRole, FutureWebSocketClientBuilder
from .legacy_inverse_ws_client import (
    LegacyInversePrivateWebSocketClientBuilder,
    LegacyInversePublicWebSocketClientBuilder,
)
from .legacy_linear_ws_client import (
    LegacyLinearPrivateWebSocketClientBuilder,
    LegacyLinearPublicWebSocketClientBuilder,
)
from .legacy_spot_ws_client import (
    LegacySpotPrivateWebSocketClientBuilder,
    LegacySpotV2WebSocketClientBuilder,
    LegacySpotWebSocketClientBuilder,
)
from .option_ws_client import OptionWebSocketClientBuilder
from .private_ws_client import PrivateWebSocketClientBuilder
from .spot_ws_client import SpotWebSocketClientBuilder


class WebSocketApiClient:
    """創建各類 WebSocket 客戶端構建器"""

    @staticmethod
    def spot() -> SpotWebSocketClientBuilder:
        return SpotWebSocketClientBuilder()

    @staticmethod
    def future_linear() -> FutureWebSocketClientBuilder:
        return FutureWebSocketClientBuilder(FutureRole.LINEAR)

    @staticmethod
    def future_inverse() -> FutureWebSocketClientBuilder:
        return FutureWebSocketClientBuilder(FutureRole.INVERSE)

    @staticmethod
    def option() -> OptionWebSocketClientBuilder:
        return OptionWebSocketClientBuilder()

    @staticmethod
    def private() -> PrivateWebSocketClientBuilder:
        return PrivateWebSocketClientBuilder()

    @staticmethod
    def legacy_spot() -> LegacySpotWebSocketClientBuilder:
        return LegacySpotWebSocketClientBuilder()

    @staticmethod
    def legacy_spot_v2() -> LegacySpotV2WebSocketClientBuilder:
        return LegacySpotV2WebSocketClientBuilder()

    @staticmethod
    def legacy_spot_private() -> LegacySpotPrivateWebSocketClientBuilder:
        return LegacySpotPrivateWebSocketClientBuilder()

    @staticmethod
    def legacy_linear_public() -> LegacyLinearPublicWebSocketClientBuilder:
        return LegacyLinearPublicWebSocketClientBuilder()

    @staticmethod
    def legacy_linear_private() -> LegacyLinearPrivateWebSocketClientBuilder:
        return LegacyLinearPrivateWebSocketClientBuilder()

    @staticmethod
    def legacy_inverse_public() -> LegacyInversePublicWebSocketClientBuilder:
        return LegacyInversePublicWebSocketClientBuilder()

    @staticmethod
    def legacy_inverse_private() -> LegacyInversePrivateWebSocketClientBuilder:
        return LegacyInversePrivateWebSocketClientBuilder()

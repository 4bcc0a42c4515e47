"""
Bybit V5 私有 WebSocket 客戶端

連接後先發送一次 auth 請求，再發送訂閱請求。
"""
from __future__ import annotations

from config import MAINNET_PRIVATE, TESTNET_PRIVATE

from .base_ws_client import BaseClientBuilder, BaseWebSocketClient, require_credentials
from .responses import PRIVATE_DECODER, ResponseDecoder


class PrivateWebSocketClient(BaseWebSocketClient):
    """
    私有頻道客戶端

    回調收到的消息類型見 responses.PrivateResponse，認證結果以 OpResponse 形式到達。
    """

    def get_market_name(self) -> str:
        return "Private"

    def _get_decoder(self) -> ResponseDecoder:
        return PRIVATE_DECODER

    def subscribe_position(self):
        self.subscriber.sub_position()

    def subscribe_order(self):
        self.subscriber.sub_order()

    def subscribe_wallet(self):
        self.subscriber.sub_wallet()

    def subscribe_execution(self):
        self.subscriber.sub_execution()

    def subscribe_greek(self):
        self.subscriber.sub_greek()


class PrivateWebSocketClientBuilder(BaseClientBuilder):
    MAINNET_URI = MAINNET_PRIVATE
    TESTNET_URI = TESTNET_PRIVATE

    def build_with_credentials(self, api_key: str, secret: str) -> PrivateWebSocketClient:
        """使用 API key 和 secret 構建私有客戶端"""
        return PrivateWebSocketClient(
            self._config(),
            credentials=require_credentials(api_key, secret),
            connector=self._connector,
        )

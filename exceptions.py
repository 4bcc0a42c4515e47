"""
WebSocket 客戶端異常定義

致命錯誤（連接、序列化、I/O、時鐘）會中止 run()；
單條消息的解碼錯誤只在本地記錄，不會中斷會話。
"""
from typing import Optional


class BybitWSError(Exception):
    """所有 WebSocket 客戶端錯誤的基類"""


class WSConnectionError(BybitWSError, ConnectionError):
    """URI 無效或握手失敗"""


class WSSerializationError(BybitWSError):
    """無法序列化出站控制消息"""


class WSIOError(BybitWSError):
    """讀寫 socket 時發生的非超時錯誤"""


class ClockError(BybitWSError):
    """無法讀取系統時間"""


class WSDecodeError(BybitWSError):
    """
    入站消息無法解碼為任何已知的響應類型

    Attributes:
        raw: 原始消息內容，便於排查
    """

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw

"""
API认证和签名相关模块
"""
import hashlib
import hmac
from typing import List

from config import AUTH_EXPIRES_WINDOW_MS
from utils.helpers import get_timestamp_ms


def create_signature(secret_key: str, message: str) -> str:
    """
    创建API签名

    Args:
        secret_key: API私钥
        message: 要签名的消息

    Returns:
        HMAC-SHA256 小写十六进制签名
    """
    return hmac.new(
        secret_key.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256,
    ).hexdigest()


def build_auth_args(api_key: str, secret_key: str, expires_window_ms: int = AUTH_EXPIRES_WINDOW_MS) -> List[str]:
    """
    构建 WebSocket auth 请求参数

    签名内容为 "GET/realtime" + expires，expires 为当前毫秒时间加上有效窗口。

    Returns:
        [api_key, expires, signature]

    Raises:
        ClockError: 无法读取系统时间
    """
    expires = get_timestamp_ms() + expires_window_ms
    signature = create_signature(secret_key, f"GET/realtime{expires}")
    return [api_key, str(expires), signature]

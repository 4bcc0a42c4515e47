"""
輔助函數模塊
"""
import time
from typing import Iterator, List, Sequence, TypeVar

from exceptions import ClockError

T = TypeVar("T")


def get_timestamp_ms() -> int:
    """
    獲取當前 UNIX 毫秒時間戳

    Returns:
        毫秒時間戳

    Raises:
        ClockError: 無法讀取系統時間，或系統時間早於 UNIX epoch
    """
    try:
        now = time.time()
    except OSError as e:
        raise ClockError(f"讀取系統時間失敗: {e}") from e
    if now < 0:
        raise ClockError(f"系統時間早於 UNIX epoch: {now}")
    return int(now * 1000)


def chunked(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """
    將序列按固定大小切分，保持原有順序

    Args:
        items: 待切分的序列
        size: 每批最大元素數量

    Returns:
        依次產出每一批的列表，最後一批可能不足 size
    """
    if size <= 0:
        raise ValueError(f"批次大小必須大於 0: {size}")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])

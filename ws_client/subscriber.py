"""
訂閱主題累加器

只負責按固定模板拼接主題字符串，不做任何 I/O、去重或頻道校驗。
"""
from __future__ import annotations

from enum import Enum
from typing import List, Tuple, Union


class KlineInterval(str, Enum):
    """K線週期"""
    MIN1 = "1"
    MIN3 = "3"
    MIN5 = "5"
    MIN15 = "15"
    MIN30 = "30"
    MIN60 = "60"
    MIN120 = "120"
    MIN240 = "240"
    MIN360 = "360"
    MIN720 = "720"
    DAY = "D"
    WEEK = "W"
    MONTH = "M"


class Subscriber:
    """
    訂閱主題列表

    主題按調用順序保存，會話開始後通過 freeze() 凍結，之後不允許再修改。
    """

    def __init__(self):
        self._topics: List[str] = []
        self._frozen = False

    @property
    def topics(self) -> Tuple[str, ...]:
        """已累加的主題（只讀）"""
        return tuple(self._topics)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Tuple[str, ...]:
        """凍結訂閱列表並返回快照"""
        self._frozen = True
        return self.topics

    def sub_orderbook(self, symbol: str, depth: int):
        self.sub(f"orderbook.{int(depth)}.{symbol}")

    def sub_ticker(self, symbol: str):
        self.sub(f"tickers.{symbol}")

    def sub_trade(self, symbol: str):
        self.sub(f"publicTrade.{symbol}")

    def sub_kline(self, symbol: str, interval: Union[KlineInterval, str]):
        self.sub(f"kline.{_interval_value(interval)}.{symbol}")

    def sub_liquidation(self, symbol: str):
        self.sub(f"liquidation.{symbol}")

    def sub_lt_kline(self, symbol: str, interval: Union[KlineInterval, str]):
        self.sub(f"kline_lt.{_interval_value(interval)}.{symbol}")

    def sub_lt_ticker(self, symbol: str):
        self.sub(f"tickers_lt.{symbol}")

    def sub_lt_nav(self, symbol: str):
        self.sub(f"lt.{symbol}")

    def sub_position(self):
        self.sub("position")

    def sub_execution(self):
        self.sub("execution")

    def sub_order(self):
        self.sub("order")

    def sub_wallet(self):
        self.sub("wallet")

    def sub_greek(self):
        self.sub("greeks")

    def sub(self, topic: str):
        """追加一個原始主題"""
        if self._frozen:
            raise RuntimeError(f"會話已開始，訂閱列表已凍結，無法添加 {topic}")
        self._topics.append(topic)

    def __len__(self) -> int:
        return len(self._topics)


def _interval_value(interval: Union[KlineInterval, str]) -> str:
    if isinstance(interval, KlineInterval):
        return interval.value
    return str(interval)

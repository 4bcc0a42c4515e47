"""
本地訂單簿維護

收到 snapshot 時重置，收到 delta 時逐檔更新。
delta 中的檔位不保證有序，數量為 0 表示刪除該價位。
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, List, Optional, Tuple

Level = Tuple[Decimal, Decimal]


class LocalOrderBook:
    """
    本地訂單簿

    bids 按價格降序，asks 按價格升序。
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        self.bids: List[Level] = []
        self.asks: List[Level] = []
        self.update_id: Optional[int] = None
        self.timestamp: Optional[int] = None

    def apply(self, response: Any):
        """
        應用一條訂單簿消息

        Args:
            response: OrderbookResponse 或 OptionOrderbookResponse
        """
        data = response.data
        if data.s != self.symbol:
            return

        # u=1 表示服務重啟後的快照，同樣需要覆蓋本地訂單簿
        if response.type_ == "snapshot" or data.u == 1:
            self.reset(data.b, data.a)
        else:
            self._update_side(self.bids, data.b, descending=True)
            self._update_side(self.asks, data.a, descending=False)

        self.update_id = data.u
        self.timestamp = response.ts

    def reset(self, bids: Iterable[Tuple[str, str]], asks: Iterable[Tuple[str, str]]):
        self.bids = sorted(_to_levels(bids), key=lambda x: x[0], reverse=True)
        self.asks = sorted(_to_levels(asks), key=lambda x: x[0])

    @staticmethod
    def _update_side(book: List[Level], updates: Iterable[Tuple[str, str]], descending: bool):
        for price, quantity in _to_levels(updates):
            for i, (level_price, _) in enumerate(book):
                if level_price == price:
                    if quantity == 0:
                        del book[i]
                    else:
                        book[i] = (price, quantity)
                    break
            else:
                if quantity != 0:
                    book.append((price, quantity))
                    book.sort(key=lambda x: x[0], reverse=descending)

    def best_bid(self) -> Optional[Level]:
        return self.bids[0] if self.bids else None

    def best_ask(self) -> Optional[Level]:
        return self.asks[0] if self.asks else None

    def mid_price(self) -> Optional[Decimal]:
        """獲取中間價"""
        bid, ask = self.best_bid(), self.best_ask()
        if bid is None or ask is None:
            return None
        return (bid[0] + ask[0]) / 2

    def top(self, depth: int = 10) -> Tuple[List[Level], List[Level]]:
        """返回前 depth 檔 (bids, asks)"""
        return self.bids[:depth], self.asks[:depth]


def _to_levels(items: Iterable[Tuple[str, str]]) -> List[Level]:
    return [(Decimal(price), Decimal(quantity)) for price, quantity in items]

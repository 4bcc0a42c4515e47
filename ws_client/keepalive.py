"""
心跳信號生成器

後台線程按固定間隔產生 ping 負載並放入隊列，
主循環通過 poll() 非阻塞地取出並發送。
"""
from __future__ import annotations

import json
import queue
import threading
from typing import Callable, Optional

from exceptions import ClockError
from logger import setup_logger
from utils.helpers import get_timestamp_ms

logger = setup_logger("keepalive")


def op_ping() -> str:
    """V5 協議的 ping 控制消息"""
    return json.dumps({"op": "ping"}, separators=(',', ':'))


def timestamp_ping() -> str:
    """舊版現貨協議的 ping 消息，攜帶毫秒時間戳"""
    return json.dumps({"ping": get_timestamp_ms()}, separators=(',', ':'))


class KeepAlive:
    """
    定時 ping 生成器

    啟動後立即產生一次 ping，之後每隔 interval 秒產生一次。
    與主循環的讀取節奏無關，主循環只負責盡快發送已就緒的 ping。
    """

    def __init__(self, interval: float, payload_factory: Callable[[], str] = op_ping):
        """
        Args:
            interval: ping 間隔（秒）
            payload_factory: 生成 ping 負載字符串的函數
        """
        self.interval = interval
        self.payload_factory = payload_factory
        self._queue: "queue.Queue[str]" = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self):
        """開始心跳線程"""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="ws-keepalive", daemon=True)
        self._thread.start()

    def _run(self):
        while not self._stop_event.is_set():
            try:
                self._queue.put_nowait(self.payload_factory())
            except ClockError as e:
                logger.warning(f"生成 ping 負載失敗，跳過本次心跳: {e}")
            if self._stop_event.wait(self.interval):
                break

    def poll(self) -> Optional[str]:
        """
        非阻塞地取出一個 ping 負載

        Returns:
            就緒的 ping 字符串，沒有則返回 None
        """
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def stop(self, timeout: float = 1.0):
        """停止心跳線程"""
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)
        self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

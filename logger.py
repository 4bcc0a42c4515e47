"""
日志配置模塊

每個模塊/市場一個 logger，共用同一個日志文件。
"""
import logging
import sys
from typing import Optional, Union

from config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None]) -> int:
    """將 "DEBUG" / 10 / None 之類的配置轉換為 logging 級別，無法識別時退回 INFO"""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logger(name="bybit_ws", level: Optional[Union[int, str]] = None):
    """
    設置並返回一個配置好的logger實例

    Args:
        name: logger 名稱，一般為模塊或市場名（如 "spot_ws"）
        level: 日志級別，默認讀取 LOG_LEVEL 環境變量

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)

    # 已配置過的 logger 直接返回
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(level if level is not None else LOG_LEVEL))
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    # LOG_FILE 為空時只輸出到控制台
    if LOG_FILE:
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

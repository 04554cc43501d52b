"""
日誌與計時工具

所有 logger 都掛在 "phonoseek" 命名空間下，函式庫本身不主動輸出。
需要看日誌時由呼叫端開啟：

    from phonoseek import enable_debug_logging
    enable_debug_logging()

或使用標準 logging：

    import logging
    logging.getLogger("phonoseek").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonoseek"
DEFAULT_FORMAT = "[%(asctime)s] %(name)s %(levelname)s: %(message)s"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_root_logger.addHandler(logging.NullHandler())

# 計時日誌預設關閉
_timing_enabled = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonoseek 命名空間下的 logger

    Args:
        name: 子 logger 名稱，例如 "session" -> "phonoseek.session"
    """
    if not name:
        return _root_logger
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 掛上一個 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 輸出格式
    """
    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in _root_logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        _root_logger.addHandler(handler)
    _root_logger.setLevel(level)
    return _root_logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging(enabled: bool = True) -> None:
    """
    開啟計時日誌

    開啟後 TimingContext 一律以 INFO 等級輸出耗時，不受各自設定的等級影響。
    """
    global _timing_enabled
    _timing_enabled = enabled
    if enabled:
        setup_logger(level=min(_root_logger.level or logging.INFO, logging.INFO))


def is_timing_enabled() -> bool:
    return _timing_enabled


class TimingContext:
    """
    計時 context manager

    使用範例:
        with TimingContext("build_mapping", logger):
            ...

    離開區塊時記錄耗時，若有 callback 則呼叫 callback(operation, elapsed)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or _root_logger
        self.level = logging.INFO if _timing_enabled else level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器版本

        @log_timing("generate_dictionary")
        def generate_dictionary(...): ...
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator

"""
全域配置模組

提供統一的配置類別，控制日誌、計時與 pattern 編譯行為。

使用方式:
    from phonoseek import SearchSession

    # 簡單開啟 verbose 模式
    session = SearchSession(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phonoseek").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .core.pattern import DEFAULT_FLAGS
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class SearchConfig:
    """
    搜尋配置類別 (進階用途)

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        escape_literals: 匹配片段是否以字面文字編譯（False 時與舊版行為相同，不跳脫）
        strict: 詞典未就緒時是否直接拋出 MappingNotReadyError
        flags: 編譯 pattern 使用的 re 旗標

    使用範例:
        config = SearchConfig(strict=True)
        session = SearchSession(config)
    """

    # 日誌控制
    verbose: bool = False

    # 計時回呼
    on_timing: Optional[Callable[[str, float], None]] = None

    # pattern 編譯
    escape_literals: bool = True
    flags: int = DEFAULT_FLAGS

    # 錯誤處理
    strict: bool = False

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = SearchConfig(verbose=False)

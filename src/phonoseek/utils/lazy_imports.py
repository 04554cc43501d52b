"""
延遲導入與依賴檢查

pypinyin 只有詞典生成功能會用到，安裝為可選依賴:
    pip install "phonoseek[pinyin]"

比對核心（MappingTable / FuzzyScanner / compile_pattern）不需要任何第三方套件。
"""

from __future__ import annotations

import importlib.util
from types import ModuleType
from typing import Optional

PINYIN_INSTALL_HINT = (
    "缺少拼音依賴。請執行:\n"
    "  pip install \"phonoseek[pinyin]\"\n"
    "或安裝完整版本:\n"
    "  pip install \"phonoseek[all]\""
)

_pypinyin: Optional[ModuleType] = None


def is_pinyin_available() -> bool:
    """檢查 pypinyin 是否已安裝（不實際載入）"""
    return importlib.util.find_spec("pypinyin") is not None


def check_pinyin_dependencies() -> None:
    """
    檢查拼音依賴，缺少時拋出 ImportError

    Raises:
        ImportError: 附帶安裝提示
    """
    if not is_pinyin_available():
        raise ImportError(PINYIN_INSTALL_HINT)


def get_pypinyin() -> ModuleType:
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is not None:
        return _pypinyin

    try:
        import pypinyin
    except ImportError as exc:
        raise ImportError(PINYIN_INSTALL_HINT) from exc

    _pypinyin = pypinyin
    return _pypinyin

"""
phonoseek - 多位元組字元模糊搜尋 (Multibyte Character Fuzzy Search)

核心概念（以中文為基準）：
- 詞典把每個漢字對應到可代表它的簡單字元（拼音首字母），例如「机 j」「长 cz」
- 使用者以簡單字元輸入查詢，文件中每個字只要其簡單字元包含查詢對應位置的符號即算命中
- 所有命中的原文片段組成單一正規表示式，交給編輯器原生搜尋做高亮與跳轉

官方入口（穩定 API）：
- `phonoseek.build_mapping`
- `phonoseek.generate_enriched_pattern`
- `phonoseek.SearchSession`
"""

# =============================================================================
# 核心比對層
# =============================================================================
from phonoseek.core import (
    NOT_READY_NOTICE,
    FuzzyScanner,
    MalformedLine,
    MappingNotReadyError,
    MappingTable,
    PhonoseekError,
    SearchEvent,
    SearchEventHandler,
    build_mapping,
    compile_pattern,
    generate_enriched_pattern,
    generate_match_list,
)

# =============================================================================
# Session（宿主整合）
# =============================================================================
from phonoseek.config import SearchConfig
from phonoseek.session import SearchSession

# =============================================================================
# 日誌工具
# =============================================================================
from phonoseek.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from phonoseek.utils.lazy_imports import check_pinyin_dependencies, is_pinyin_available

__all__ = [
    # Core
    "build_mapping",
    "generate_match_list",
    "compile_pattern",
    "generate_enriched_pattern",
    "MappingTable",
    "FuzzyScanner",
    # Session
    "SearchSession",
    "SearchConfig",
    # Errors / events
    "PhonoseekError",
    "MappingNotReadyError",
    "MalformedLine",
    "NOT_READY_NOTICE",
    "SearchEvent",
    "SearchEventHandler",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_pinyin_available",
    "check_pinyin_dependencies",
]

__version__ = "0.1.0"

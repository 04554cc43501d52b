"""
搜尋 Session (SearchSession)

持有映射表，並提供宿主編輯器需要的兩個指令：
- search_multibytes: 使用者輸入簡單字元查詢，產生可直接交給原生搜尋的 pattern
- enrich_current_pattern: 以宿主「上一次搜尋」的 pattern 原文當查詢，產生擴充後的 pattern

生命週期:
- Session 在宿主載入時建立一次
- 詞典文字由宿主讀取後交給 load_dictionary()；重新載入會整張表替換
- 詞典就緒前的搜尋請求會被拒絕（回報提示，strict 模式則拋例外）
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Union

from phonoseek.config import SearchConfig
from phonoseek.core.errors import NOT_READY_NOTICE, MappingNotReadyError
from phonoseek.core.events import SearchEventHandler, emit_event
from phonoseek.core.mapping import MappingTable, build_mapping
from phonoseek.core.pattern import compile_pattern
from phonoseek.core.scanner import FuzzyScanner
from phonoseek.utils.logger import TimingContext, get_logger, setup_logger


class SearchSession:
    """
    搜尋 Session

    使用範例:
        >>> session = SearchSession()
        >>> table = session.load_dictionary("机 j\\n场 c")
        >>> session.search_multibytes("jc", "我在机场").pattern
        '机场'
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[SearchEventHandler] = None,
        strict: bool = False,
    ):
        if config is not None and (verbose or on_timing is not None or strict):
            raise TypeError(
                "verbose / on_timing / strict 不可與 config 同時指定，請直接設定在 SearchConfig 上"
            )
        self._config = config or SearchConfig(verbose=verbose, on_timing=on_timing, strict=strict)
        self._on_event = on_event
        self._mapping: Optional[MappingTable] = None
        self._scanner: Optional[FuzzyScanner] = None
        self._init_logger(verbose=self._config.verbose, on_timing=self._config.on_timing)

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._timing_callback = on_timing
        if verbose:
            setup_logger(level=logging.DEBUG)
        self._logger = get_logger("session")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def mapping(self) -> Optional[MappingTable]:
        """目前的映射表；尚未載入時為 None"""
        return self._mapping

    def is_ready(self) -> bool:
        return self._mapping is not None

    # ========== 詞典 ==========

    def load_dictionary(self, dictionary_text: str) -> MappingTable:
        """
        由詞典文字建立映射表並替換目前的表

        壞行不會中斷載入，會以 "malformed_line" 事件回報並列在 mapping.diagnostics。
        """
        with self._log_timing("SearchSession.load_dictionary"):
            mapping = build_mapping(dictionary_text, on_event=self._on_event)

        self._mapping = mapping
        self._scanner = FuzzyScanner(mapping)
        if mapping.diagnostics:
            self._logger.warning(
                f"Dictionary loaded with {len(mapping.diagnostics)} malformed line(s) skipped"
            )
        self._logger.info(f"Dictionary loaded: {len(mapping)} entries")
        return mapping

    def unload(self) -> None:
        """丟棄目前的映射表，之後的搜尋會回報未就緒"""
        self._mapping = None
        self._scanner = None

    # ========== 搜尋指令 ==========

    def _require_scanner(self) -> Optional[FuzzyScanner]:
        if self._scanner is not None:
            return self._scanner

        if self._config.strict:
            raise MappingNotReadyError()

        self._logger.warning(NOT_READY_NOTICE)
        emit_event(self._on_event, {"type": "not_ready", "message": NOT_READY_NOTICE}, self._logger)
        return None

    def find_matches(self, query: str, content: str) -> List[str]:
        """
        回傳 content 中所有符合 query 的原文片段

        詞典未就緒時回傳空列表（strict 模式拋出 MappingNotReadyError）。
        """
        scanner = self._require_scanner()
        if scanner is None:
            return []
        return scanner.generate_match_list(query, content)

    def search_multibytes(self, query: str, content: str) -> Optional["re.Pattern[str]"]:
        """
        以使用者輸入的查詢產生擴充 pattern

        Returns:
            re.Pattern: 擴充後的 pattern；詞典未就緒時回傳 None
        """
        scanner = self._require_scanner()
        if scanner is None:
            return None

        with self._log_timing("SearchSession.search_multibytes"):
            match_list = scanner.generate_match_list(query, content)
            pattern = compile_pattern(
                match_list,
                escape=self._config.escape_literals,
                flags=self._config.flags,
            )

        self._logger.debug(f"[Search] '{query}' -> {len(match_list)} match(es): {pattern.pattern}")
        emit_event(
            self._on_event,
            {"type": "pattern_compiled", "query": query, "match_count": len(match_list)},
            self._logger,
        )
        return pattern

    def enrich_current_pattern(
        self,
        current: Union["re.Pattern[str]", str, None],
        content: str,
    ) -> Optional["re.Pattern[str]"]:
        """
        以宿主目前的搜尋 pattern 原文當查詢，產生擴充 pattern

        Args:
            current: 宿主上一次的搜尋（re.Pattern 或字串）；None 表示尚未搜尋過
            content: 文件全文

        Returns:
            re.Pattern: 擴充後的 pattern；沒有上一次搜尋或詞典未就緒時回傳 None
        """
        if current is None:
            self._logger.debug("No current search pattern, nothing to enrich")
            return None

        query = current.pattern if isinstance(current, re.Pattern) else str(current)
        return self.search_multibytes(query, content)

"""
複雜字 → 簡單字 映射表

詞典格式（UTF-8，一行一筆，空行忽略，不支援註解）:

    机 j
    长 cz
    场 c

左欄是文件中的單一字元（漢字），右欄是該字可被哪些簡單字元（拼音首字母）代表。
同一個字出現多次時，以最後一次為準，方便用檔案順序覆寫。
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

from phonoseek.utils.logger import TimingContext, get_logger

from .errors import MalformedLine
from .events import SearchEventHandler, emit_event

_logger = get_logger("mapping")

UTF8_BOM = "\ufeff"


class MappingTable(Mapping):
    """
    唯讀映射表

    由 build_mapping() 建立，建立後不可修改。
    查不到的字元視為映射到自己（例如英數字直接比對字面）。
    """

    __slots__ = ("_entries", "_diagnostics")

    def __init__(
        self,
        entries: Optional[Dict[str, str]] = None,
        diagnostics: Tuple[MalformedLine, ...] = (),
    ):
        self._entries = MappingProxyType(dict(entries or {}))
        self._diagnostics = tuple(diagnostics)

    def __getitem__(self, char: str) -> str:
        return self._entries[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingTable(entries={len(self)}, diagnostics={len(self._diagnostics)})"

    @property
    def diagnostics(self) -> Tuple[MalformedLine, ...]:
        """建表時被跳過的詞典行"""
        return self._diagnostics

    def simple_chars(self, char: str) -> str:
        """取得字元可接受的簡單字元字串，查無時回傳字元本身"""
        return self._entries.get(char, char)


def _check_fields(fields: list) -> Optional[str]:
    if len(fields) != 2:
        return f"expected 2 fields, got {len(fields)}"
    complex_char, simple_chars = fields
    if not complex_char or not simple_chars:
        return "empty field"
    if len(complex_char) != 1:
        return f"complex field must be a single character, got {len(complex_char)}"
    return None


def build_mapping(
    dictionary_text: str,
    on_event: Optional[SearchEventHandler] = None,
) -> MappingTable:
    """
    由詞典文字建立映射表

    每行去除前後空白後以單一空格切分，必須剛好得到兩個非空欄位。
    不符合的行記錄為 MalformedLine 並跳過，整體建表不會因此失敗。

    Args:
        dictionary_text: 詞典全文
        on_event: 事件回呼，每個壞行會收到一個 "malformed_line" 事件

    Returns:
        MappingTable: 唯讀映射表，壞行列在 diagnostics
    """
    entries: Dict[str, str] = {}
    diagnostics = []

    # 以 UTF-8 BOM 存檔的詞典，BOM 會黏在第一個字上
    if dictionary_text.startswith(UTF8_BOM):
        dictionary_text = dictionary_text[len(UTF8_BOM):]

    with TimingContext("build_mapping", _logger):
        for index, raw_line in enumerate(dictionary_text.split("\n")):
            line = raw_line.strip()
            if not line:
                continue

            fields = line.split(" ")
            reason = _check_fields(fields)
            if reason is not None:
                malformed = MalformedLine(line_number=index + 1, line=line, reason=reason)
                diagnostics.append(malformed)
                _logger.warning(str(malformed))
                emit_event(
                    on_event,
                    {
                        "type": "malformed_line",
                        "line_number": malformed.line_number,
                        "line": malformed.line,
                        "reason": malformed.reason,
                    },
                    _logger,
                )
                continue

            complex_char, simple_chars = fields
            entries[complex_char] = simple_chars

    _logger.debug(f"Mapping built: {len(entries)} entries, {len(diagnostics)} malformed lines")
    return MappingTable(entries, tuple(diagnostics))

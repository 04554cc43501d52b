"""
匹配列表 → 正規表示式

把掃描到的原文片段組成一個 alternation，交給宿主的原生搜尋（高亮、跳轉）。
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .mapping import MappingTable
from .scanner import generate_match_list

DEFAULT_FLAGS = re.IGNORECASE | re.MULTILINE

# 沒有任何匹配時使用：永遠不會命中的 pattern
NEVER_MATCH = "(?!)"


def compile_pattern(
    match_list: Iterable[str],
    escape: bool = True,
    flags: int = DEFAULT_FLAGS,
) -> "re.Pattern[str]":
    """
    將匹配片段組成單一 pattern

    Args:
        match_list: 原文片段（依發現順序）
        escape: 是否將片段視為字面文字；False 時直接串接（片段中的 . * ( 等會被當成語法）
        flags: re 旗標，預設忽略大小寫 + 多行

    Returns:
        re.Pattern: 空列表時回傳永不命中的 pattern
    """
    # 重複片段只保留第一次出現
    literals = list(dict.fromkeys(match_list))
    if not literals:
        return re.compile(NEVER_MATCH, flags)

    if escape:
        literals = [re.escape(word) for word in literals]
    return re.compile("|".join(literals), flags)


def generate_enriched_pattern(
    query: str,
    content: str,
    table: MappingTable,
    escape: bool = True,
    flags: Optional[int] = None,
) -> "re.Pattern[str]":
    """掃描 content 中所有符合 query 的片段，並編譯成單一 pattern"""
    match_list = generate_match_list(query, content, table)
    return compile_pattern(
        match_list,
        escape=escape,
        flags=DEFAULT_FLAGS if flags is None else flags,
    )

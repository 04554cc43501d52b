"""
模糊掃描器

在「簡單字元維度」中尋找查詢字串：文件中的每個字元透過映射表取得可接受的
簡單字元字串，只要該字串包含查詢中對應位置的符號，就算這個位置命中。

例如映射表有 "机 j"、"场 c"，查詢 "jc" 會命中文件中的 "机场"。

掃描是單趟、貪婪、不回溯的。遇到不符時只看一步：
1. 目前字元包含查詢的下一個符號 → 繼續
2. 否則若包含查詢的第一個符號 → 以目前字元為新的起點（長度 1）
3. 否則 → 歸零
這個判斷順序不可調換。它是啟發式規則，某些重疊的合法匹配會被略過，
屬於已知限制。
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .mapping import MappingTable

NOT_FOUND = -1


class FuzzyScanner:
    """
    綁定一張映射表的掃描器

    本身不保存掃描狀態，同一個實例可以重複、交錯使用。

    使用範例:
        >>> table = build_mapping("机 j\\n场 c")
        >>> FuzzyScanner(table).generate_match_list("jc", "去机场")
        ['机场']
    """

    def __init__(self, table: MappingTable):
        self.table = table

    def find_next(self, query: str, content: str, start: int = 0) -> int:
        """
        從 start 開始找下一個匹配

        Returns:
            int: 匹配起點；找不到時回傳 NOT_FOUND (-1)
        """
        query_len = len(query)
        if query_len == 0:
            return NOT_FOUND

        simple_chars = self.table.simple_chars
        query_idx = 0
        for content_idx in range(start, len(content)):
            candidates = simple_chars(content[content_idx])
            if query[query_idx] in candidates:
                query_idx += 1
            elif query[0] in candidates:
                query_idx = 1
            else:
                query_idx = 0

            if query_idx == query_len:
                return content_idx - query_len + 1

        return NOT_FOUND

    def iter_matches(self, query: str, content: str) -> Iterator[Tuple[int, int, str]]:
        """
        逐一輸出 matches

        Yields:
            (start, end, word)
            - start: match 起始 index（含）
            - end: match 結束 index（不含）

        下一輪從 start + 1 重新掃描，所以相鄰的 match 內容可能重疊。
        """
        if not query:
            return

        query_len = len(query)
        start = 0
        while True:
            found = self.find_next(query, content, start)
            if found == NOT_FOUND:
                return
            yield found, found + query_len, content[found:found + query_len]
            start = found + 1

    def generate_match_list(self, query: str, content: str) -> List[str]:
        """依發現順序回傳所有匹配的原文片段；空查詢回傳空列表"""
        return [word for _, _, word in self.iter_matches(query, content)]


def find_next(query: str, content: str, table: MappingTable, start: int = 0) -> int:
    return FuzzyScanner(table).find_next(query, content, start)


def generate_match_list(query: str, content: str, table: MappingTable) -> List[str]:
    return FuzzyScanner(table).generate_match_list(query, content)

"""
Pattern 編譯測試

驗證：
1. 匹配片段組成 alternation，忽略大小寫 + 多行
2. 空列表編譯為永不命中的 pattern
3. 預設跳脫特殊字元；escape=False 保留舊行為
"""

import re

import pytest

from phonoseek import build_mapping, compile_pattern, generate_enriched_pattern
from phonoseek.core.pattern import DEFAULT_FLAGS, NEVER_MATCH


class TestCompilePattern:
    """測試 compile_pattern"""

    def test_alternation(self):
        """測試多個片段組成 alternation"""
        pattern = compile_pattern(["机场", "鸡肠"])

        assert pattern.pattern == "机场|鸡肠"
        assert pattern.findall("去机场买鸡肠") == ["机场", "鸡肠"]

    def test_flags(self):
        """測試忽略大小寫 + 多行"""
        pattern = compile_pattern(["ab"])

        assert pattern.flags & re.IGNORECASE
        assert pattern.flags & re.MULTILINE
        assert pattern.search("xAB")

    def test_empty_list_never_matches(self):
        """測試空列表不拋例外，且永不命中"""
        pattern = compile_pattern([])

        assert pattern.pattern == NEVER_MATCH
        assert pattern.search("") is None
        assert pattern.search("任何內容 anything") is None

    def test_special_characters_escaped(self):
        """測試片段中的特殊字元以字面比對"""
        pattern = compile_pattern(["a.b", "(x)"])

        assert pattern.search("a.b")
        assert pattern.search("axb") is None
        assert pattern.search("(x)")

    def test_unescaped_mode(self):
        """測試 escape=False 時直接串接"""
        pattern = compile_pattern(["a.b"], escape=False)

        assert pattern.pattern == "a.b"
        assert pattern.search("axb")

    def test_duplicates_folded(self):
        """測試重複片段只保留第一次"""
        pattern = compile_pattern(["长城", "城长", "长城"])

        assert pattern.pattern == "长城|城长"

    def test_custom_flags(self):
        """測試自訂旗標"""
        pattern = compile_pattern(["ab"], flags=0)

        assert pattern.search("AB") is None


class TestGenerateEnrichedPattern:
    """測試掃描 + 編譯"""

    def setup_method(self):
        self.table = build_mapping("机 j\n场 c\n鸡 j\n肠 c")

    def test_pattern_from_content(self):
        """測試由內容產生 pattern"""
        pattern = generate_enriched_pattern("jc", "去机场买鸡肠", self.table)

        assert pattern.pattern == "机场|鸡肠"
        assert pattern.flags & DEFAULT_FLAGS == DEFAULT_FLAGS

    def test_no_matches(self):
        """測試沒有匹配時回傳永不命中的 pattern"""
        pattern = generate_enriched_pattern("zz", "去机场", self.table)

        assert pattern.pattern == NEVER_MATCH
        assert pattern.search("去机场") is None

    def test_empty_query(self):
        """測試空查詢"""
        pattern = generate_enriched_pattern("", "去机场", self.table)

        assert pattern.pattern == NEVER_MATCH

    def test_literal_content_with_metacharacters(self):
        """測試文件中的特殊字元不會被當成語法"""
        table = build_mapping("")
        pattern = generate_enriched_pattern("a+", "1 a+ 2", table)

        assert pattern.findall("a+ aa") == ["a+"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

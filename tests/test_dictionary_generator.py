"""
拼音詞典生成器測試

驗證：
1. 漢字 → 拼音首字母
2. 多音字收錄所有讀音（heteronym）
3. 非漢字略過
4. 輸出文字可直接被 build_mapping 讀取，且無壞行
"""

import pytest

from phonoseek import build_mapping, check_pinyin_dependencies, generate_match_list, is_pinyin_available
from phonoseek.utils import lazy_imports
from phonoseek.utils.lazy_imports import get_pypinyin
from phonoseek.dictionary import (
    PinyinDictionaryGenerator,
    cached_get_first_letters,
    cjk_unified_chars,
    generate_dictionary,
    render_dictionary,
)


class TestPinyinDictionaryGenerator:
    """測試詞典生成"""

    def setup_method(self):
        self.generator = PinyinDictionaryGenerator()
        # 只取預設讀音，輸出不隨 pypinyin 多音字資料版本變動
        self.single_reading = PinyinDictionaryGenerator(heteronym=False)

    def test_first_letters(self):
        """測試預設讀音的首字母"""
        mapping = self.single_reading.generate("机场中国")

        assert mapping == {"机": "j", "场": "c", "中": "z", "国": "g"}

    def test_heteronym_keeps_default_reading(self):
        """測試收錄多音時仍包含預設讀音的首字母"""
        mapping = self.generator.generate("机场中国")

        assert set(mapping) == {"机", "场", "中", "国"}
        assert mapping["机"][0] == "j"
        assert mapping["中"][0] == "z"

    def test_heteronym(self):
        """測試多音字收錄所有讀音的首字母"""
        letters = self.generator.generate("长")["长"]

        assert "c" in letters
        assert "z" in letters
        assert len(letters) == len(set(letters))

    def test_skips_non_hanzi(self):
        """測試英數與標點被略過"""
        mapping = self.generator.generate("a1，机")

        assert set(mapping) == {"机"}
        assert "j" in mapping["机"]

    def test_duplicate_chars(self):
        """測試重複字元只保留一次"""
        mapping = self.single_reading.generate("机机机")

        assert mapping == {"机": "j"}

    def test_letters_are_ascii_lowercase(self):
        """測試輸出皆為可輸入的 a-z 小寫字母"""
        mapping = self.generator.generate("台北车站嗯呣欸")

        for letters in mapping.values():
            assert letters
            assert letters.isascii()
            assert letters.isalpha()
            assert letters == letters.lower()

    def test_non_ascii_initial_dropped(self):
        """測試「欸」的 ê 讀音不會進入詞典"""
        letters = self.generator.generate("欸").get("欸", "")

        assert "ê" not in letters
        assert all("a" <= letter <= "z" for letter in letters)

    def test_cached_first_letters(self):
        """測試快取版函數"""
        cached_get_first_letters.cache_clear()
        cached_get_first_letters("中")
        cached_get_first_letters("中")

        assert cached_get_first_letters.cache_info().hits >= 1


class TestRenderDictionary:
    """測試輸出詞典文字"""

    def test_render_format(self):
        """測試一行一筆並以換行結尾"""
        text = render_dictionary({"机": "j", "长": "cz"})

        assert text == "机 j\n长 cz\n"

    def test_render_empty(self):
        """測試空映射"""
        assert render_dictionary({}) == ""

    def test_round_trip_through_build_mapping(self):
        """測試生成的詞典可直接建表並用於搜尋"""
        mapping = generate_dictionary("我去机场接你", heteronym=False)
        table = build_mapping(render_dictionary(mapping))

        assert table.diagnostics == ()
        assert dict(table) == mapping
        assert generate_match_list("jc", "我去机场接你", table) == ["机场"]


class TestDependencyChecks:
    """測試 pypinyin 依賴檢查"""

    def test_available(self):
        """測試已安裝時可正常檢查與載入"""
        assert is_pinyin_available()
        check_pinyin_dependencies()
        assert get_pypinyin().__name__ == "pypinyin"

    def test_missing_dependency_hint(self, monkeypatch):
        """測試缺少依賴時附帶安裝提示"""
        monkeypatch.setattr(lazy_imports.importlib.util, "find_spec", lambda name: None)

        assert not is_pinyin_available()
        with pytest.raises(ImportError) as exc_info:
            check_pinyin_dependencies()
        assert "phonoseek[pinyin]" in str(exc_info.value)


class TestCjkRange:
    """測試 CJK 字元範圍"""

    def test_range_bounds(self):
        """測試範圍起訖"""
        chars = list(cjk_unified_chars())

        assert chars[0] == chr(0x4E00)
        assert chars[-1] == chr(0x9FFF)
        assert len(chars) == 0x9FFF - 0x4E00 + 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

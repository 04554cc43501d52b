"""
拼音詞典生成器模組

以 pypinyin 為每個漢字產生「拼音首字母」詞典，輸出格式即 build_mapping 讀取的格式:

    中 z
    长 cz
    行 xh

多音字預設收錄所有讀音的首字母，因此查詢 "c" 與 "z" 都能命中「长」。

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在實際生成詞典時才會載入 pypinyin。
"""

from functools import lru_cache
from typing import Dict, Iterable, Iterator

from phonoseek.utils.lazy_imports import get_pypinyin
from phonoseek.utils.logger import get_logger, log_timing

# CJK Unified Ideographs 基本區
CJK_UNIFIED_START = 0x4E00
CJK_UNIFIED_END = 0x9FFF


@lru_cache(maxsize=50000)
def cached_get_first_letters(char: str, heteronym: bool = True) -> str:
    """
    快取版拼音首字母計算

    Returns:
        str: 去重後的 a-z 首字母字串（依 pypinyin 讀音順序）；非漢字回傳空字串
    """
    pypinyin = get_pypinyin()
    readings = pypinyin.pinyin(
        char,
        style=pypinyin.Style.FIRST_LETTER,
        heteronym=heteronym,
        errors="ignore",
    )
    # 只保留可直接輸入的 a-z（例如「欸」的 ê 讀音略過）
    letters = [reading[:1].lower() for group in readings for reading in group if reading]
    letters = [letter for letter in letters if "a" <= letter <= "z"]
    return "".join(dict.fromkeys(letters))


def cjk_unified_chars() -> Iterator[str]:
    """逐一輸出 CJK Unified Ideographs 基本區 (U+4E00..U+9FFF) 的所有字元"""
    for code_point in range(CJK_UNIFIED_START, CJK_UNIFIED_END + 1):
        yield chr(code_point)


class PinyinDictionaryGenerator:
    """
    拼音首字母詞典生成器

    功能:
    1. generate: 為字元集合產生 {漢字: 首字母字串}
    2. render: 將映射輸出為詞典文字

    Example:
        >>> generator = PinyinDictionaryGenerator(heteronym=False)
        >>> generator.generate("中国")
        {'中': 'z', '国': 'g'}
    """

    def __init__(self, heteronym: bool = True):
        """
        Args:
            heteronym: 是否收錄多音字的所有讀音
        """
        self.heteronym = heteronym
        self._logger = get_logger("dictionary.generator")

    @log_timing("PinyinDictionaryGenerator.generate")
    def generate(self, chars: Iterable[str]) -> Dict[str, str]:
        """
        為字元集合產生首字母映射

        沒有拼音讀音的字元（英數、標點等）會被略過，搜尋時它們本來就以字面比對。
        重複的字元只保留一次。
        """
        mapping: Dict[str, str] = {}
        skipped = 0
        for char in chars:
            if char in mapping:
                continue
            letters = cached_get_first_letters(char, self.heteronym)
            if not letters:
                skipped += 1
                continue
            mapping[char] = letters

        self._logger.debug(f"Generated {len(mapping)} entries, skipped {skipped} char(s)")
        return mapping

    def generate_all(self) -> Dict[str, str]:
        """為整個 CJK Unified Ideographs 基本區產生映射"""
        return self.generate(cjk_unified_chars())

    @staticmethod
    def render(mapping: Dict[str, str]) -> str:
        """輸出詞典文字：一行一筆 "字 首字母"，以換行結尾"""
        if not mapping:
            return ""
        return "".join(f"{char} {letters}\n" for char, letters in mapping.items())


def generate_dictionary(chars: Iterable[str], heteronym: bool = True) -> Dict[str, str]:
    return PinyinDictionaryGenerator(heteronym=heteronym).generate(chars)


def render_dictionary(mapping: Dict[str, str]) -> str:
    return PinyinDictionaryGenerator.render(mapping)

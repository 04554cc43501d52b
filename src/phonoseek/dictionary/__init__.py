"""
詞典模組 - 拼音首字母詞典生成

安裝拼音支援:
    pip install "phonoseek[pinyin]"
"""

from .generator import (
    PinyinDictionaryGenerator,
    cached_get_first_letters,
    cjk_unified_chars,
    generate_dictionary,
    render_dictionary,
)

__all__ = [
    "PinyinDictionaryGenerator",
    "generate_dictionary",
    "render_dictionary",
    "cjk_unified_chars",
    "cached_get_first_letters",
]

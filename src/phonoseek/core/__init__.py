"""
核心比對層

詞典文字 → MappingTable → FuzzyScanner → 匹配片段 → compile_pattern → re.Pattern
"""

from .errors import NOT_READY_NOTICE, MalformedLine, MappingNotReadyError, PhonoseekError
from .events import SearchEvent, SearchEventHandler
from .mapping import MappingTable, build_mapping
from .pattern import DEFAULT_FLAGS, NEVER_MATCH, compile_pattern, generate_enriched_pattern
from .scanner import NOT_FOUND, FuzzyScanner, find_next, generate_match_list

__all__ = [
    "MappingTable",
    "build_mapping",
    "FuzzyScanner",
    "find_next",
    "generate_match_list",
    "NOT_FOUND",
    "compile_pattern",
    "generate_enriched_pattern",
    "DEFAULT_FLAGS",
    "NEVER_MATCH",
    "SearchEvent",
    "SearchEventHandler",
    "PhonoseekError",
    "MappingNotReadyError",
    "MalformedLine",
    "NOT_READY_NOTICE",
]

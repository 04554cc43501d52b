"""
例外與診斷資料

原則（與事件模型一致）：
- 詞典中的個別壞行只記錄診斷並跳過，不中斷整個建表流程
- 詞典尚未載入就要求搜尋，預設回報提示；strict 模式才拋例外
"""

from __future__ import annotations

from dataclasses import dataclass

NOT_READY_NOTICE = "Complex char to simple char dict is not ready yet."


class PhonoseekError(Exception):
    """phonoseek 所有例外的基類"""


class MappingNotReadyError(PhonoseekError):
    """詞典尚未載入完成就要求掃描"""

    def __init__(self, message: str = NOT_READY_NOTICE):
        super().__init__(message)


@dataclass(frozen=True)
class MalformedLine:
    """
    詞典中無法解析的一行

    Attributes:
        line_number: 行號（從 1 起算）
        line: 去除前後空白後的內容
        reason: 被跳過的原因
    """

    line_number: int
    line: str
    reason: str

    def __str__(self) -> str:
        return f'Dictionary line {self.line_number} "{self.line}": {self.reason}'

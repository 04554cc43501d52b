"""
事件模型（Event Model）

本專案預設不直接輸出到 stdout。
若宿主需要顯示提示（例如「詞典尚未就緒」）或收集詞典診斷，請使用事件回呼。

設計原則：
- Production favors availability：允許降級，但不允許「默默」降級。
- Evaluation favors detectability：strict 模式下遇到錯誤應直接 fail。
"""

from __future__ import annotations

import logging
from typing import Callable, Literal, Optional, TypedDict


class SearchEvent(TypedDict, total=False):
    type: Literal["malformed_line", "not_ready", "pattern_compiled"]

    # malformed_line
    line_number: int
    line: str
    reason: str

    # pattern_compiled
    query: str
    match_count: int

    # not_ready
    message: str


SearchEventHandler = Callable[[SearchEvent], None]


def emit_event(
    handler: Optional[SearchEventHandler],
    event: SearchEvent,
    logger: logging.Logger,
) -> None:
    """呼叫事件回呼；回呼本身的錯誤只記錄，不影響掃描流程"""
    if handler is None:
        return
    try:
        handler(event)
    except Exception:
        logger.exception("on_event 回呼執行失敗")

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, List, Optional, Sequence

from taskjournal.errors import JournalDecodeError
from taskjournal.utils import format_local, from_timestamp, now_utc, smart_ljust, to_timestamp

TEXT_WIDTH = 50
EMPTY_MESSAGE = "Task list is empty!"


@dataclass(frozen=True)
class Task:
    """一条日志记录：文本 + 创建时间 (UTC, 秒级精度)"""

    text: str
    created_at: datetime

    @classmethod
    def create(cls, text: str, now: Optional[datetime] = None) -> "Task":
        if now is None:
            now = now_utc()
        return cls(text=text, created_at=now)

    def to_dict(self) -> dict:
        return {"text": self.text, "created_at": to_timestamp(self.created_at)}

    @classmethod
    def from_dict(cls, raw: Any) -> "Task":
        if not isinstance(raw, dict):
            raise JournalDecodeError(f"task entry must be an object, got {type(raw).__name__}")
        text = raw.get("text")
        created_at = raw.get("created_at")
        if not isinstance(text, str):
            raise JournalDecodeError("task entry is missing a string 'text' field")
        # bool 是 int 的子类，需要单独排除
        if not isinstance(created_at, int) or isinstance(created_at, bool):
            raise JournalDecodeError("task entry is missing an integer 'created_at' field")
        try:
            stamp = from_timestamp(created_at)
        except (OverflowError, OSError, ValueError) as e:
            raise JournalDecodeError(f"task timestamp out of range: {created_at}") from e
        return cls(text=text, created_at=stamp)


def render_task(task: Task, tz: Optional[tzinfo] = None) -> str:
    return f"{smart_ljust(task.text, TEXT_WIDTH)} [{format_local(task.created_at, tz)}]"


def render_list(tasks: Sequence[Task], tz: Optional[tzinfo] = None) -> List[str]:
    """按存储顺序渲染，编号从 1 开始，与 done 命令的 position 一致"""
    if not tasks:
        return [EMPTY_MESSAGE]
    return [f"{idx}: {render_task(task, tz)}" for idx, task in enumerate(tasks, 1)]

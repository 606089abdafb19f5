"""Journal persistence.

The whole journal lives in one file as a single JSON array. Every operation
opens the file, loads the full list, changes it in memory and writes the
full list back. There is no locking: two processes running at the same time
against the same file can lose an update (last write wins), and a crash in
the middle of a write can leave a truncated file behind.
"""
import json
import logging
import os
from datetime import datetime
from typing import IO, List, Optional, Sequence

from taskjournal.errors import InvalidPositionError, JournalDecodeError, JournalEncodeError
from taskjournal.task import Task

logger = logging.getLogger(__name__)


def open_journal(path, create: bool) -> IO[str]:
    """Open the journal for reading and writing.

    With ``create`` a missing file is created empty; an existing file is
    never truncated here. Without it a missing file raises FileNotFoundError.
    """
    if create:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        return os.fdopen(fd, 'r+', encoding='utf-8')
    return open(path, 'r+', encoding='utf-8')


def load_all(fh: IO[str]) -> List[Task]:
    """Read every task from ``fh`` and rewind it to offset 0.

    An empty file is an empty journal, not an error.
    """
    fh.seek(0)
    try:
        content = fh.read()
    except UnicodeDecodeError as e:
        raise JournalDecodeError(f"journal file is not valid UTF-8: {e}") from e
    fh.seek(0)
    if not content.strip():
        return []
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise JournalDecodeError(f"journal file is not valid JSON: {e}") from e
    except RecursionError as e:
        raise JournalDecodeError("journal file is nested too deeply") from e
    if not isinstance(raw, list):
        raise JournalDecodeError("journal file must contain a JSON array")
    return [Task.from_dict(item) for item in raw]


def dumps_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=2)


def save_all(fh: IO[str], tasks: Sequence[Task]) -> None:
    data = dumps_tasks(tasks)
    # 编码失败时文件必须保持原样，所以先编码再截断
    try:
        data.encode("utf-8")
    except UnicodeEncodeError as e:
        raise JournalEncodeError(f"task text cannot be stored as UTF-8: {e}") from e
    # 先截断：删除后新内容更短，不截断会残留旧数据
    fh.seek(0)
    fh.truncate()
    fh.write(data)
    fh.flush()


def add(path, text: str, now: Optional[datetime] = None) -> Task:
    task = Task.create(text, now)
    with open_journal(path, create=True) as fh:
        tasks = load_all(fh)
        tasks.append(task)
        save_all(fh, tasks)
    logger.debug("added task #%d to %s", len(tasks), path)
    return task


def remove_at(path, position: int) -> Task:
    """Remove the task at 1-based ``position`` and return it.

    Positions index the journal as it is right now; they are not stable ids.
    On an out-of-range position nothing is written.
    """
    with open_journal(path, create=False) as fh:
        tasks = load_all(fh)
        if position < 1 or position > len(tasks):
            raise InvalidPositionError(position, len(tasks))
        removed = tasks.pop(position - 1)
        save_all(fh, tasks)
    logger.debug("removed task #%d from %s, %d left", position, path, len(tasks))
    return removed


def list_tasks(path) -> List[Task]:
    with open(path, 'r', encoding='utf-8') as fh:
        tasks = load_all(fh)
    logger.debug("loaded %d tasks from %s", len(tasks), path)
    return tasks

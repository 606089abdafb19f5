"""Journal settings resolved from command-line options and the environment.

Resolution order for the journal file: explicit option, ``JOURNAL_FILE``,
then ``~/.rusty-journal.json``.
"""
import logging
import os
from pathlib import Path
from typing import Optional

ENV_JOURNAL_FILE = "JOURNAL_FILE"
ENV_LOG_LEVEL = "JOURNAL_LOG_LEVEL"

DEFAULT_JOURNAL_NAME = ".rusty-journal.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_journal_path() -> Path:
    return Path(os.path.expanduser("~")) / DEFAULT_JOURNAL_NAME


def journal_path(override: Optional[Path] = None) -> Path:
    if override is not None:
        return Path(override).expanduser()
    return _env_path(ENV_JOURNAL_FILE, default_journal_path())


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = _env(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # 未知名称时 getLevelName 返回字符串
    return level if isinstance(level, int) else logging.WARNING

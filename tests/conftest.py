from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from taskjournal.task import Task


@pytest.fixture()
def journal_file(tmp_path: Path) -> Path:
    return tmp_path / "journal.json"


@pytest.fixture()
def base_time() -> datetime:
    return datetime(2024, 3, 1, 9, 30, 15, tzinfo=timezone.utc)


@pytest.fixture()
def sample_tasks(base_time: datetime) -> list:
    return [
        Task("buy milk", base_time),
        Task("walk dog", base_time + timedelta(minutes=5)),
        Task("写周报 [draft]", base_time + timedelta(hours=2)),
    ]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("JOURNAL_FILE", raising=False)
    monkeypatch.delenv("JOURNAL_LOG_LEVEL", raising=False)

import json

import pytest
from typer.testing import CliRunner

from taskjournal.main import app


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture()
def run(runner, journal_file):
    def _run(*args):
        return runner.invoke(app, ["--journal-file", str(journal_file), *args])
    return _run


def texts(journal_file):
    return [item["text"] for item in json.loads(journal_file.read_text(encoding="utf-8"))]


def test_add_list_done(run, journal_file):
    result = run("add", "buy milk")
    assert result.exit_code == 0, result.output
    assert "Added: buy milk" in result.output

    run("add", "walk dog")
    assert texts(journal_file) == ["buy milk", "walk dog"]

    result = run("done", "1")
    assert result.exit_code == 0, result.output
    assert "Removed: buy milk" in result.output
    assert texts(journal_file) == ["walk dog"]

    result = run("list")
    assert result.exit_code == 0, result.output
    assert "1: walk dog" in result.output
    assert "buy milk" not in result.output


def test_list_empty_journal(run, journal_file):
    journal_file.write_bytes(b"")
    result = run("list")
    assert result.exit_code == 0
    assert "Task list is empty!" in result.output


def test_list_prints_brackets_literally(run):
    run("add", "[bold]not markup[/bold]")
    result = run("list")
    assert "1: [bold]not markup[/bold]" in result.output


def test_list_missing_file(run, journal_file):
    result = run("list")
    assert result.exit_code == 1
    assert "Journal file not found" in result.output
    assert not journal_file.exists()


def test_done_missing_file(run, journal_file):
    result = run("done", "1")
    assert result.exit_code == 1
    assert "Journal file not found" in result.output
    assert not journal_file.exists()


@pytest.mark.parametrize("position", ["0", "3"])
def test_done_invalid_position(run, journal_file, position):
    run("add", "buy milk")
    run("add", "walk dog")
    before = journal_file.read_bytes()

    result = run("done", position)

    assert result.exit_code == 1
    assert f"Invalid task position: {position}" in result.output
    assert journal_file.read_bytes() == before


def test_done_rejects_non_integer(run):
    run("add", "buy milk")
    result = run("done", "first")
    assert result.exit_code == 2


def test_corrupt_journal(run, journal_file):
    journal_file.write_text("[{", encoding="utf-8")
    for args in (("list",), ("add", "x"), ("done", "1")):
        result = run(*args)
        assert result.exit_code == 1
        assert "Corrupt journal file" in result.output
    assert journal_file.read_text(encoding="utf-8") == "[{"


def test_journal_file_from_env(runner, monkeypatch, tmp_path):
    path = tmp_path / "env.json"
    monkeypatch.setenv("JOURNAL_FILE", str(path))
    result = runner.invoke(app, ["add", "from env"])
    assert result.exit_code == 0, result.output
    assert texts(path) == ["from env"]


def test_add_unencodable_text_keeps_journal(run, journal_file):
    run("add", "keep me")
    before = journal_file.read_bytes()

    result = run("add", "bad \udcff")

    assert result.exit_code == 1
    assert "Cannot store task" in result.output
    assert journal_file.read_bytes() == before
    assert texts(journal_file) == ["keep me"]


@pytest.mark.parametrize("content", [b"\xff\xfe", b"[" * 100000])
def test_undecodable_journal(run, journal_file, content):
    journal_file.write_bytes(content)
    for args in (("list",), ("add", "x"), ("done", "1")):
        result = run(*args)
        assert result.exit_code == 1
        assert "Corrupt journal file" in result.output
    assert journal_file.read_bytes() == content


def test_add_missing_directory(runner, tmp_path):
    path = tmp_path / "missing" / "journal.json"
    result = runner.invoke(app, ["--journal-file", str(path), "add", "buy milk"])
    assert result.exit_code == 1
    assert "Cannot write journal file" in result.output
    assert not path.parent.exists()

#!/usr/bin/env python3
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from taskjournal import config, storage
from taskjournal.errors import InvalidPositionError, JournalDecodeError, JournalEncodeError
from taskjournal.log import setup_logging
from taskjournal.task import render_list

app = typer.Typer(
    help="A command line to-do journal.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def fail(message: str):
    print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


def journal_of(ctx: typer.Context) -> Path:
    return ctx.obj["journal_file"]


@app.callback()
def main(
    ctx: typer.Context,
    journal_file: Optional[Path] = typer.Option(
        None, "--journal-file", "-j", help="Use a different journal file.", dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
):
    setup_logging(config.log_level(verbose))
    path = config.journal_path(journal_file)
    logger.debug("using journal file %s", path)
    ctx.obj = {"journal_file": path}


@app.command()
def add(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="The task description text."),
):
    """Write a task to the journal file."""
    path = journal_of(ctx)
    try:
        task = storage.add(path, text)
    except JournalDecodeError as e:
        fail(f"Corrupt journal file {path}: {e}")
    except JournalEncodeError as e:
        fail(f"Cannot store task: {e}")
    except OSError as e:
        fail(f"Cannot write journal file {path}: {e}")
    print(f"[green]Added:[/green] {escape(task.text)}")


@app.command()
def done(
    ctx: typer.Context,
    position: int = typer.Argument(..., min=0, help="Position of the entry, as shown by list."),
):
    """Remove an entry."""
    path = journal_of(ctx)
    try:
        task = storage.remove_at(path, position)
    except InvalidPositionError as e:
        fail(str(e))
    except FileNotFoundError:
        fail(f"Journal file not found: {path}")
    except JournalDecodeError as e:
        fail(f"Corrupt journal file {path}: {e}")
    except OSError as e:
        fail(f"Cannot update journal file {path}: {e}")
    print(f"[green]Removed:[/green] {escape(task.text)}")


@app.command("list")
def list_entries(ctx: typer.Context):
    """List all tasks in the journal file."""
    path = journal_of(ctx)
    try:
        tasks = storage.list_tasks(path)
    except FileNotFoundError:
        fail(f"Journal file not found: {path}")
    except JournalDecodeError as e:
        fail(f"Corrupt journal file {path}: {e}")
    except OSError as e:
        fail(f"Cannot read journal file {path}: {e}")
    for line in render_list(tasks):
        console.print(line, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()

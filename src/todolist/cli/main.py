"""CLI entry point for todolist.

Invoked as::

    todo [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m todolist.cli.main

Commands
--------
print       Print the current list
add         Append a task
rm          Remove a task by number
modify      Replace the text of a task
version     Show version information

Each list command turns its arguments into exactly one instruction and
applies it to the store loaded from the snapshot file. The snapshot is
written back before the process exits, whether or not the instruction
succeeded.
"""
from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from todolist import __version__
from todolist.config import Settings, get_settings
from todolist.core import Add, Instruction, Modify, Print, Remove, TodoError
from todolist.persistence import open_store

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

TASK_INDEX = click.IntRange(min=1)


def _log_level(level_name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, else WARNING."""
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=_log_level(level_name),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _execute(settings: Settings, instruction: Instruction) -> None:
    """Apply ``instruction`` to the persisted store, exiting 1 on failure."""
    logger.debug("Running %r against %s", instruction, settings.store_path)
    try:
        with open_store(settings.store_path, settings.owner_name) as store:
            store.apply(instruction, console)
    except TodoError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    # only reached once the snapshot has been saved
    if isinstance(instruction, Add):
        console.print(f"[green]Added[/green] task {len(store)}")
    elif isinstance(instruction, Remove):
        console.print(f"[green]Removed[/green] task {instruction.index}")
    elif isinstance(instruction, Modify):
        console.print(f"[green]Updated[/green] task {instruction.index}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="todo")
@click.option(
    "--file",
    "-f",
    "store_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Snapshot file (default: $TODO_FILE or tasks.json)",
)
@click.option(
    "--owner",
    default=None,
    help="Owner name for a new list (default: $TODO_OWNER or the current user)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, store_file: str | None, owner: str | None, verbose: bool) -> None:
    """Personal to-do list kept in a file in the working directory."""
    settings = get_settings()
    if store_file is not None:
        settings = dataclasses.replace(settings, store_path=Path(store_file))
    if owner:
        settings = dataclasses.replace(settings, owner_name=owner)
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]todolist[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# list commands
# ---------------------------------------------------------------------------


@cli.command(name="print")
@click.option("--plain", is_flag=True, default=False, help="One 'N: task' line per task")
@click.pass_obj
def print_command(settings: Settings, plain: bool) -> None:
    """Print out all tasks in the list."""
    _execute(settings, Print(plain=plain))


@cli.command(name="add")
@click.argument("text")
@click.pass_obj
def add_command(settings: Settings, text: str) -> None:
    """Add a task to the end of the list.

    TEXT is the task description.
    """
    _execute(settings, Add(text))


@cli.command(name="rm")
@click.argument("index", type=TASK_INDEX)
@click.pass_obj
def rm_command(settings: Settings, index: int) -> None:
    """Remove a task from the list.

    INDEX is the task number shown by ``print``.
    """
    _execute(settings, Remove(index))


@cli.command(name="modify")
@click.argument("index", type=TASK_INDEX)
@click.option("--new", "-n", "text", required=True, help="New text for the task")
@click.pass_obj
def modify_command(settings: Settings, index: int, text: str) -> None:
    """Replace the text of a task.

    INDEX is the task number shown by ``print``.

    Examples:

    \b
        todo modify 2 --new "walk the dog"
        todo modify 1 -n "buy oat milk"
    """
    _execute(settings, Modify(index, text))


if __name__ == "__main__":
    cli()

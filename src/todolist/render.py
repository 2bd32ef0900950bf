"""Rendering of the task list to a rich console."""
from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text


def _empty_message(owner_name: str) -> str:
    return f"No tasks to print for {owner_name}"


def render_tasks(
    tasks: Sequence[str], owner_name: str, console: Console | None = None
) -> None:
    """Print ``tasks`` as a numbered table under a heading naming the owner.

    Task text is shown literally; rich markup in a task is not interpreted.
    """
    console = console or Console()
    if not tasks:
        console.print(_empty_message(owner_name), markup=False, highlight=False, soft_wrap=True)
        return

    console.print(f"\n{owner_name}'s To-Do List:\n", markup=False, highlight=False, soft_wrap=True)
    table = Table()
    table.add_column("#", justify="right", style="bold", no_wrap=True)
    table.add_column("Task")
    for i, task in enumerate(tasks, start=1):
        table.add_row(str(i), Text(task))
    console.print(table)


def render_plain(
    tasks: Sequence[str], owner_name: str, console: Console | None = None
) -> None:
    """Print ``tasks`` as ``N: text`` lines, one per task."""
    console = console or Console()
    if not tasks:
        console.print(_empty_message(owner_name), markup=False, highlight=False, soft_wrap=True)
        return
    for i, task in enumerate(tasks, start=1):
        console.print(f"{i}: {task}", markup=False, highlight=False, soft_wrap=True)

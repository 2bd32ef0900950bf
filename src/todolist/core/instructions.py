"""Instruction variants consumed by ``TaskStore.apply``.

An instruction is a single requested mutation or query. Each variant is a
frozen dataclass; the ``Instruction`` union covers all of them and
downstream code dispatches with ``isinstance`` checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Add:
    """Append ``text`` to the end of the list."""

    text: str


@dataclass(frozen=True, slots=True)
class Remove:
    """Delete the task at 1-based position ``index``."""

    index: int


@dataclass(frozen=True, slots=True)
class Modify:
    """Replace the task at 1-based position ``index`` with ``text``."""

    index: int
    text: str


@dataclass(frozen=True, slots=True)
class Print:
    """Render the current list without changing it.

    ``plain`` selects one ``N: text`` line per task instead of a table.
    """

    plain: bool = False


Instruction = Union[Add, Remove, Modify, Print]

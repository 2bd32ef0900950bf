"""Core domain logic: the task store, its instructions and errors.

Submodules in core/ should not import from persistence/ or cli/.
"""
from __future__ import annotations

from todolist.core.errors import (
    IndexOutOfRangeError,
    PersistenceError,
    StoreFormatError,
    TodoError,
)
from todolist.core.instructions import Add, Instruction, Modify, Print, Remove
from todolist.core.store import TaskStore

__all__ = [
    "Add",
    "IndexOutOfRangeError",
    "Instruction",
    "Modify",
    "PersistenceError",
    "Print",
    "Remove",
    "StoreFormatError",
    "TaskStore",
    "TodoError",
]

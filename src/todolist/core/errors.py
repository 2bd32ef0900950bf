"""Error types for the task list.

Every error raised by library code derives from ``TodoError`` so that the
CLI can report all domain failures through a single ``except`` clause.
Argument parsing errors are not part of this hierarchy: they are raised
by click as ``UsageError`` before an instruction ever reaches the store.
"""
from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all task-list errors."""


class IndexOutOfRangeError(TodoError, IndexError):
    """Raised when an instruction targets a position outside ``[1, length]``.

    Parameters
    ----------
    index:
        The 1-based index supplied by the caller.
    length:
        Number of tasks in the store at the time of the call.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length == 0:
            detail = "the list is empty"
        else:
            detail = f"valid range is 1..{length}"
        super().__init__(f"Task {index} does not exist ({detail})")


class PersistenceError(TodoError):
    """Raised when the snapshot file cannot be read or written."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class StoreFormatError(PersistenceError):
    """Raised when a persisted snapshot cannot be decoded into a store."""

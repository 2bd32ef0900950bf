"""todolist: a personal to-do list persisted to a file.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import todolist
    from todolist import Add, Modify, Print

    store = todolist.load("tasks.json", owner_name="alice")
    store.apply(Add("buy milk"))
    store.apply(Modify(1, "buy oat milk"))
    store.apply(Print())
    todolist.save(store, "tasks.json")

    # or, saving automatically when the block exits
    with todolist.open_store("tasks.json", owner_name="alice") as store:
        store.apply(Add("walk dog"))

    todolist.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path

__version__: str = "0.1.0"

from todolist.core import (  # noqa: E402
    Add,
    IndexOutOfRangeError,
    Instruction,
    Modify,
    PersistenceError,
    Print,
    Remove,
    StoreFormatError,
    TaskStore,
    TodoError,
)
from todolist.persistence import open_store  # noqa: E402


def load(path: Path | str, owner_name: str) -> TaskStore:
    """Load the store persisted at ``path``.

    Parameters
    ----------
    path:
        Snapshot file. A missing file yields an empty store.
    owner_name:
        Owner of the new store when no snapshot exists yet.

    Returns
    -------
    TaskStore
        The loaded (or freshly created) store.

    Raises
    ------
    PersistenceError
        If the file cannot be read.
    StoreFormatError
        If the file is not a valid snapshot.
    """
    from todolist.persistence.storage import load_store

    return load_store(path, owner_name)


def save(store: TaskStore, path: Path | str) -> None:
    """Write ``store`` to ``path``.

    Raises
    ------
    PersistenceError
        If the file cannot be written.
    """
    from todolist.persistence.storage import save_store

    save_store(store, path)


__all__ = [
    "__version__",
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
    "load",
    "open_store",
    "save",
]

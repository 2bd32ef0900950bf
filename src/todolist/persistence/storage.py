"""Loading and saving the task store.

The snapshot file is read once when a command starts and written once
when it finishes. ``open_store`` ties the two together so that the save
happens on every exit path, including when the body raises::

    with open_store(Path("tasks.json"), owner_name="alice") as store:
        store.apply(Add("buy milk"))

No locking is performed: two processes working on the same file at the
same time can overwrite each other's changes.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

from todolist.core.errors import PersistenceError, StoreFormatError
from todolist.core.store import TaskStore
from todolist.persistence.serializer import StoreSerializer, format_for_path

logger = logging.getLogger(__name__)


def load_store(path: Path | str, owner_name: str) -> TaskStore:
    """Read the store persisted at ``path``.

    A missing file is a first run: an empty store owned by ``owner_name``
    is returned and nothing is written.

    Raises
    ------
    PersistenceError
        If the file exists but cannot be read.
    StoreFormatError
        If the file contents are not a valid snapshot.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No snapshot at %s, starting empty list for %r", path, owner_name)
        return TaskStore.new(owner_name)
    except UnicodeDecodeError as exc:
        raise StoreFormatError(f"{path} is not valid UTF-8: {exc}", path) from exc
    except OSError as exc:
        raise PersistenceError(f"Cannot read {path}: {exc}", path) from exc

    store = StoreSerializer().loads(text, format_for_path(path))
    logger.debug("Loaded %d task(s) from %s", len(store), path)
    return store


def save_store(store: TaskStore, path: Path | str) -> None:
    """Write ``store`` to ``path``, replacing any previous snapshot.

    The snapshot is encoded in full and written to a sibling temporary
    file, which then replaces ``path``. A failed save leaves the previous
    snapshot in place.

    Raises
    ------
    PersistenceError
        If the store cannot be encoded or the file cannot be written.
    """
    path = Path(path)
    text = StoreSerializer().dumps(store, format_for_path(path))
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PersistenceError(
            f"Cannot write {path}: task text is not valid UTF-8 ({exc})", path
        ) from exc

    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
    except OSError as exc:
        with suppress(OSError):
            tmp_path.unlink()
        raise PersistenceError(f"Cannot write {path}: {exc}", path) from exc
    logger.debug("Saved %d task(s) to %s", len(store), path)


@contextmanager
def open_store(path: Path | str, owner_name: str) -> Iterator[TaskStore]:
    """Load the store at ``path`` and save it back when the block exits.

    The save runs even if the block raises. If loading fails the block
    never runs and the file is left untouched.
    """
    store = load_store(path, owner_name)
    try:
        yield store
    finally:
        save_store(store, path)

"""Snapshot persistence for the task store.

Exports the ``StoreSerializer`` plus the ``load_store`` / ``save_store``
pair and the ``open_store`` context manager that brackets a command.
"""
from __future__ import annotations

from todolist.persistence.serializer import StoreSerializer, format_for_path
from todolist.persistence.storage import load_store, open_store, save_store

__all__ = [
    "StoreSerializer",
    "format_for_path",
    "load_store",
    "open_store",
    "save_store",
]

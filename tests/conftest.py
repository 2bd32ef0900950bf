"""Shared test fixtures for todolist.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from todolist.core import TaskStore


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TODO_* variables out of every test."""
    for name in ("TODO_FILE", "TODO_OWNER", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "todolist"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(buffer: io.StringIO) -> Console:
    """A plain, 80-column console writing into ``buffer``."""
    return Console(file=buffer, width=80, color_system=None)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore.new("alice")


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"

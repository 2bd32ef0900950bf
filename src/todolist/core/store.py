"""The in-memory task store.

A ``TaskStore`` owns an ordered list of task descriptions plus the name of
its owner. It is mutated in place by ``apply`` and converted to and from
its JSON snapshot form with ``serialize`` / ``deserialize``. Other
snapshot formats and file I/O live in ``todolist.persistence``.

Indices exposed to instructions are 1-based. Range checks run before any
mutation, so a failed ``Remove`` or ``Modify`` leaves the store as it was.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from todolist.core.errors import (
    IndexOutOfRangeError,
    PersistenceError,
    StoreFormatError,
)
from todolist.core.instructions import Add, Instruction, Modify, Print, Remove

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


@dataclass
class TaskStore:
    """Ordered task descriptions and the owner they belong to.

    Parameters
    ----------
    owner_name:
        Display name of the list's owner.
    tasks:
        Task descriptions in insertion order. Duplicates and empty
        strings are allowed.
    """

    owner_name: str
    tasks: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, owner_name: str) -> "TaskStore":
        """Return an empty store owned by ``owner_name``."""
        return cls(owner_name=owner_name)

    def __len__(self) -> int:
        return len(self.tasks)

    # ------------------------------------------------------------------
    # Instruction dispatch
    # ------------------------------------------------------------------

    def apply(self, instruction: Instruction, console: "Console | None" = None) -> None:
        """Apply a single instruction to the store.

        Parameters
        ----------
        instruction:
            The instruction to execute.
        console:
            Output sink for ``Print``. Defaults to a stdout console.

        Raises
        ------
        IndexOutOfRangeError
            If a ``Remove`` or ``Modify`` targets a missing position.
        TypeError
            If ``instruction`` is not one of the instruction variants.
        """
        if isinstance(instruction, Add):
            self.tasks.append(instruction.text)
            logger.debug("Added task #%d for %r", len(self.tasks), self.owner_name)
        elif isinstance(instruction, Remove):
            pos = self._position(instruction.index)
            removed = self.tasks.pop(pos)
            logger.debug("Removed task #%d %r", instruction.index, removed)
        elif isinstance(instruction, Modify):
            pos = self._position(instruction.index)
            self.tasks[pos] = instruction.text
            logger.debug("Modified task #%d", instruction.index)
        elif isinstance(instruction, Print):
            from todolist.render import render_plain, render_tasks

            render = render_plain if instruction.plain else render_tasks
            render(self.tasks, self.owner_name, console)
        else:
            raise TypeError(f"Unknown instruction type: {type(instruction)}")

    def _position(self, index: int) -> int:
        """Translate a 1-based index into a list position, checking range."""
        if index < 1 or index > len(self.tasks):
            raise IndexOutOfRangeError(index, len(self.tasks))
        return index - 1

    # ------------------------------------------------------------------
    # Snapshot encoding
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        """Return the snapshot form ``{"tasks": [...], "name": ...}``."""
        return {"tasks": list(self.tasks), "name": self.owner_name}

    @classmethod
    def from_dict(cls, data: object) -> "TaskStore":
        """Rebuild a store from its snapshot form, validating its shape.

        Raises
        ------
        StoreFormatError
            If ``data`` is not a mapping with a ``tasks`` list of strings
            and a string ``name``.
        """
        if not isinstance(data, dict):
            raise StoreFormatError(
                f"Snapshot must be a mapping, got {type(data).__name__}"
            )
        missing = [key for key in ("tasks", "name") if key not in data]
        if missing:
            raise StoreFormatError(f"Snapshot is missing field(s): {', '.join(missing)}")

        tasks = data["tasks"]
        name = data["name"]
        if not isinstance(tasks, list):
            raise StoreFormatError("Snapshot field 'tasks' must be a list")
        for i, task in enumerate(tasks, start=1):
            if not isinstance(task, str):
                raise StoreFormatError(
                    f"Snapshot task {i} must be a string, got {type(task).__name__}"
                )
        if not isinstance(name, str):
            raise StoreFormatError("Snapshot field 'name' must be a string")
        return cls(owner_name=name, tasks=list(tasks))

    def to_json(self, indent: int = 2) -> str:
        """Serialize the store to a pretty-printed JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "TaskStore":
        """Deserialize a store from a JSON string.

        Raises
        ------
        StoreFormatError
            If ``text`` is not valid JSON or not a valid snapshot.
        """
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # int digit limit raises ValueError, deep nesting RecursionError
            raise StoreFormatError(f"Snapshot is not valid JSON: {exc}") from exc
        return cls.from_dict(data)

    def serialize(self) -> bytes:
        """Encode the store as pretty-printed UTF-8 JSON.

        Raises
        ------
        PersistenceError
            If a task or the owner name cannot be encoded as UTF-8.
        """
        try:
            return self.to_json().encode("utf-8")
        except UnicodeEncodeError as exc:
            raise PersistenceError(f"Store cannot be encoded as UTF-8: {exc}") from exc

    @classmethod
    def deserialize(cls, data: bytes) -> "TaskStore":
        """Rebuild a store from bytes produced by ``serialize``.

        Raises
        ------
        StoreFormatError
            If ``data`` is not a valid snapshot.
        """
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StoreFormatError(f"Snapshot is not valid UTF-8: {exc}") from exc
        return cls.from_json(text)

"""Snapshot serialization for ``TaskStore``.

The serialized form is a plain dict with two keys, ``tasks`` (a list of
strings) and ``name`` (the owner), which maps directly to both JSON and
YAML.

Usage
-----
::

    from todolist.persistence.serializer import StoreSerializer

    serializer = StoreSerializer()
    json_text = serializer.to_json(store)
    store2 = serializer.from_json(json_text)
    assert store == store2
"""
from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml

from todolist.core.errors import StoreFormatError
from todolist.core.store import TaskStore

SnapshotFormat = Literal["json", "yaml"]

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def format_for_path(path: Path | str) -> SnapshotFormat:
    """Pick the snapshot format from a file name's suffix."""
    return "yaml" if Path(path).suffix.lower() in _YAML_SUFFIXES else "json"


class StoreSerializer:
    """Converts between ``TaskStore`` objects and their snapshot text.

    The dict and JSON forms are owned by ``TaskStore`` itself; this class
    adds YAML and picks a format for a given snapshot file.
    """

    # ------------------------------------------------------------------
    # dict form
    # ------------------------------------------------------------------

    def to_dict(self, store: TaskStore) -> dict[str, object]:
        """Serialize a store to a JSON-compatible dict."""
        return store.to_dict()

    def from_dict(self, data: object) -> TaskStore:
        """Deserialize a store from a plain dict, validating its shape."""
        return TaskStore.from_dict(data)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, store: TaskStore, indent: int = 2) -> str:
        """Serialize a store to a pretty-printed JSON string."""
        return store.to_json(indent=indent)

    def from_json(self, text: str) -> TaskStore:
        """Deserialize a store from a JSON string."""
        return TaskStore.from_json(text)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, store: TaskStore) -> str:
        """Serialize a store to a YAML string."""
        return yaml.dump(
            self.to_dict(store),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str) -> TaskStore:
        """Deserialize a store from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, RecursionError) as exc:
            raise StoreFormatError(f"Snapshot is not valid YAML: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # Format dispatch
    # ------------------------------------------------------------------

    def dumps(self, store: TaskStore, fmt: SnapshotFormat = "json") -> str:
        """Serialize ``store`` in the given snapshot format."""
        if fmt == "yaml":
            return self.to_yaml(store)
        return self.to_json(store) + "\n"

    def loads(self, text: str, fmt: SnapshotFormat = "json") -> TaskStore:
        """Deserialize a store from text in the given snapshot format."""
        if fmt == "yaml":
            return self.from_yaml(text)
        return self.from_json(text)

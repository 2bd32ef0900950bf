"""Unit tests for todolist.core.store: instruction dispatch, range checks
and snapshot encoding.
"""
from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from todolist.core import (
    Add,
    IndexOutOfRangeError,
    Modify,
    PersistenceError,
    Print,
    Remove,
    StoreFormatError,
    TaskStore,
)


def _store_with(*tasks: str) -> TaskStore:
    store = TaskStore.new("alice")
    for task in tasks:
        store.apply(Add(task))
    return store


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestNew:
    def test_new_store_is_empty(self) -> None:
        store = TaskStore.new("alice")
        assert store.tasks == []
        assert store.owner_name == "alice"
        assert len(store) == 0

    def test_new_stores_do_not_share_task_lists(self) -> None:
        a = TaskStore.new("a")
        b = TaskStore.new("b")
        a.apply(Add("only in a"))
        assert b.tasks == []


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------


class TestAdd:
    def test_add_appends_in_order(self) -> None:
        texts = ["one", "two", "three", "four"]
        store = _store_with(*texts)
        assert store.tasks == texts
        assert len(store) == len(texts)

    def test_duplicates_allowed(self) -> None:
        store = _store_with("same", "same")
        assert store.tasks == ["same", "same"]

    def test_empty_text_allowed(self) -> None:
        store = _store_with("")
        assert store.tasks == [""]


# ---------------------------------------------------------------------------
# Remove
# ---------------------------------------------------------------------------


class TestRemove:
    @pytest.mark.parametrize("index", [1, 2, 3])
    def test_remove_valid_index(self, index: int) -> None:
        store = _store_with("a", "b", "c")
        removed = store.tasks[index - 1]
        store.apply(Remove(index))
        assert len(store) == 2
        assert removed not in store.tasks

    def test_remove_keeps_order_of_rest(self) -> None:
        store = _store_with("a", "b", "c")
        store.apply(Remove(2))
        assert store.tasks == ["a", "c"]

    @pytest.mark.parametrize("index", [0, -1, 4, 100])
    def test_remove_out_of_range_leaves_store_unchanged(self, index: int) -> None:
        store = _store_with("a", "b", "c")
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            store.apply(Remove(index))
        assert store.tasks == ["a", "b", "c"]
        assert exc_info.value.index == index
        assert exc_info.value.length == 3

    def test_remove_from_empty_store(self, store: TaskStore) -> None:
        with pytest.raises(IndexOutOfRangeError, match="list is empty"):
            store.apply(Remove(1))
        assert store.tasks == []

    def test_error_is_an_index_error(self, store: TaskStore) -> None:
        with pytest.raises(IndexError):
            store.apply(Remove(1))


# ---------------------------------------------------------------------------
# Modify
# ---------------------------------------------------------------------------


class TestModify:
    def test_modify_replaces_text(self) -> None:
        store = _store_with("a", "b")
        store.apply(Modify(2, "B"))
        assert store.tasks == ["a", "B"]

    @pytest.mark.parametrize("index", [0, 3])
    def test_modify_out_of_range_leaves_store_unchanged(self, index: int) -> None:
        store = _store_with("a", "b")
        with pytest.raises(IndexOutOfRangeError, match=r"valid range is 1\.\.2"):
            store.apply(Modify(index, "x"))
        assert store.tasks == ["a", "b"]


# ---------------------------------------------------------------------------
# Print
# ---------------------------------------------------------------------------


class TestPrint:
    def test_print_does_not_mutate(self, console: Console) -> None:
        store = _store_with("a", "b")
        store.apply(Print(), console)
        assert store.tasks == ["a", "b"]

    def test_scenario_add_add_modify_print(
        self, console: Console, buffer: io.StringIO
    ) -> None:
        store = TaskStore.new("alice")
        store.apply(Add("buy milk"))
        store.apply(Add("walk dog"))
        store.apply(Modify(1, "buy oat milk"))
        store.apply(Print(plain=True), console)
        assert buffer.getvalue() == "1: buy oat milk\n2: walk dog\n"

    def test_print_table_lists_tasks(self, console: Console, buffer: io.StringIO) -> None:
        store = _store_with("buy milk", "walk dog")
        store.apply(Print(), console)
        out = buffer.getvalue()
        assert "alice's To-Do List" in out
        assert out.index("buy milk") < out.index("walk dog")

    def test_print_empty(self, store: TaskStore, console: Console, buffer: io.StringIO) -> None:
        store.apply(Print(), console)
        assert buffer.getvalue() == "No tasks to print for alice\n"


def test_unknown_instruction_rejected(store: TaskStore) -> None:
    with pytest.raises(TypeError, match="Unknown instruction type"):
        store.apply("add milk")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# serialize / deserialize
# ---------------------------------------------------------------------------


class TestSnapshotEncoding:
    @pytest.mark.parametrize(
        "tasks",
        [[], ["one"], ["dup", "dup", ""], ["unicode ✓ café", 'quotes "and" \\ slashes']],
    )
    def test_round_trip(self, tasks: list[str]) -> None:
        store = TaskStore(owner_name="alice", tasks=list(tasks))
        assert TaskStore.deserialize(store.serialize()) == store

    def test_serialize_is_pretty_json(self) -> None:
        data = _store_with("a").serialize()
        assert data.decode("utf-8") == '{\n  "tasks": [\n    "a"\n  ],\n  "name": "alice"\n}'
        assert json.loads(data) == {"tasks": ["a"], "name": "alice"}

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"not json",
            b"[]",
            b'{"tasks": []}',
            b'{"name": "alice"}',
            b'{"tasks": "a", "name": "alice"}',
            b'{"tasks": [1], "name": "alice"}',
            b'{"tasks": [], "name": null}',
            b"\xff\xfe",
            b"[" * 100_000,
            b'{"tasks": [' + b"1" * 5000 + b'], "name": "a"}',
        ],
    )
    def test_malformed_input_raises_format_error(self, data: bytes) -> None:
        with pytest.raises(StoreFormatError):
            TaskStore.deserialize(data)

    def test_from_json_matches_deserialize(self) -> None:
        store = _store_with("a", "b")
        assert TaskStore.from_json(store.to_json()) == store

    def test_unencodable_text_raises_persistence_error(self) -> None:
        store = _store_with("bad \udcff")
        with pytest.raises(PersistenceError, match="UTF-8"):
            store.serialize()

    def test_dict_form_round_trip(self) -> None:
        store = _store_with("a", "b")
        assert store.to_dict() == {"tasks": ["a", "b"], "name": "alice"}
        assert TaskStore.from_dict(store.to_dict()) == store

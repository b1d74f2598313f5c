"""Tests for ItemStore bulk loaders — append, replace, clear."""

from __future__ import annotations

import pytest

from relist._errors import InvalidArgument, ShrinkingReplacement
from relist.collection.changes import ItemRangeInserted, ItemRangeRemoved
from relist.display.sink import RecordingSink


class TestInsertItems:
    """insert_items — append a span in one notification."""

    def test_appends_to_existing(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a", "b"])
        store.insert_items(["c", "d", "e"])
        assert store.items == ("a", "b", "c", "d", "e")
        assert sink.changes == [ItemRangeInserted(2, 3)]

    def test_appends_to_empty(self, make_store, sink: RecordingSink) -> None:
        store = make_store()
        store.insert_items(["x", "y"])
        assert store.items == ("x", "y")
        assert sink.changes == [ItemRangeInserted(0, 2)]

    def test_accepts_any_iterable(self, make_store, sink: RecordingSink) -> None:
        store = make_store()
        store.insert_items(str(i) for i in range(3))
        assert store.items == ("0", "1", "2")
        assert sink.changes == [ItemRangeInserted(0, 3)]

    def test_empty_append_is_silent(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a"])
        store.insert_items([])
        assert store.items == ("a",)
        assert sink.changes == []
        assert store.version == 0


class TestInsertIgnoreItems:
    """insert_ignore_items — replace without diffing, never shrink."""

    def test_replaces_with_longer(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a", "b"])
        store.insert_ignore_items(["a", "b2", "c"])
        assert store.items == ("a", "b2", "c")
        assert sink.changes == [ItemRangeRemoved(0, 2), ItemRangeInserted(0, 3)]

    def test_equal_size_allowed(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a", "b"])
        store.insert_ignore_items(["c", "d"])
        assert store.items == ("c", "d")
        assert sink.changes == [ItemRangeRemoved(0, 2), ItemRangeInserted(0, 2)]

    def test_from_empty_skips_removal(self, make_store, sink: RecordingSink) -> None:
        store = make_store()
        store.insert_ignore_items(["a"])
        assert store.items == ("a",)
        assert sink.changes == [ItemRangeInserted(0, 1)]

    def test_empty_onto_empty_is_silent(self, make_store, sink: RecordingSink) -> None:
        store = make_store()
        store.insert_ignore_items([])
        assert sink.changes == []

    def test_shrinking_rejected(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a", "b", "c"])
        with pytest.raises(ShrinkingReplacement) as info:
            store.insert_ignore_items(["a"])
        assert store.items == ("a", "b", "c")
        assert sink.changes == []
        assert info.value.current_size == 3
        assert info.value.replacement_size == 1

    def test_shrinking_is_invalid_argument(self, make_store) -> None:
        store = make_store(["a", "b"])
        with pytest.raises(InvalidArgument, match="shrinking replacement not permitted"):
            store.insert_ignore_items([])
        with pytest.raises(ValueError):
            store.insert_ignore_items(["a"])


class TestClearItems:
    """clear_items — one range removal, nothing when already empty."""

    def test_clear(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a", "b", "c"])
        store.clear_items()
        assert store.items == ()
        assert sink.changes == [ItemRangeRemoved(0, 3)]

    def test_clear_empty_is_silent(self, make_store, sink: RecordingSink) -> None:
        store = make_store()
        store.clear_items()
        assert sink.changes == []

    def test_clear_twice(self, make_store, sink: RecordingSink) -> None:
        store = make_store(["a"])
        store.clear_items()
        store.clear_items()
        assert sink.changes == [ItemRangeRemoved(0, 1)]

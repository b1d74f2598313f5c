"""Tests for relist.display.broadcaster — fan-out to several sinks."""

from __future__ import annotations

import threading

import pytest

from relist.collection.changes import ItemInserted, ItemRemoved
from relist.collection.store import ItemStore
from relist.display.broadcaster import ChangeBroadcaster
from relist.display.sink import RecordingSink

from tests.conftest import ExplodingSink


class TestSubscriptions:
    """subscribe / unsubscribe bookkeeping."""

    def test_subscribe(self) -> None:
        b = ChangeBroadcaster()
        sink = RecordingSink()
        b.subscribe(sink)
        assert b.subscriber_count == 1
        assert b.get_subscribers() == (sink,)

    def test_subscribe_twice_is_noop(self) -> None:
        b = ChangeBroadcaster()
        sink = RecordingSink()
        b.subscribe(sink)
        b.subscribe(sink)
        assert b.subscriber_count == 1

    def test_unsubscribe(self) -> None:
        b = ChangeBroadcaster()
        keep, drop = RecordingSink(), RecordingSink()
        b.subscribe(keep)
        b.subscribe(drop)
        b.unsubscribe(drop)
        assert b.get_subscribers() == (keep,)

    def test_unsubscribe_unknown_is_noop(self) -> None:
        b = ChangeBroadcaster()
        b.unsubscribe(RecordingSink())
        assert b.subscriber_count == 0

    def test_concurrent_subscribe(self) -> None:
        b = ChangeBroadcaster()
        sinks = [RecordingSink() for _ in range(200)]

        def worker(chunk: list[RecordingSink]) -> None:
            for s in chunk:
                b.subscribe(s)

        threads = [
            threading.Thread(target=worker, args=(sinks[i::4],)) for i in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert b.subscriber_count == 200


class TestDelivery:
    """notify() delivers to every subscriber in order."""

    def test_all_subscribers_receive(self) -> None:
        b = ChangeBroadcaster()
        first, second = RecordingSink(), RecordingSink()
        b.subscribe(first)
        b.subscribe(second)
        store = ItemStore(["a"], sink=b)
        store.insert_item("b")
        store.remove_item(0)
        expected = [ItemInserted(1), ItemRemoved(0)]
        assert first.changes == expected
        assert second.changes == expected

    def test_no_subscribers(self) -> None:
        store = ItemStore(sink=ChangeBroadcaster())
        store.insert_item("a")
        assert store.items == ("a",)

    def test_error_stops_delivery_and_propagates(self) -> None:
        b = ChangeBroadcaster()
        later = RecordingSink()
        b.subscribe(ExplodingSink(fail_on=1))
        b.subscribe(later)
        with pytest.raises(RuntimeError):
            b.notify(ItemInserted(0))
        assert later.changes == []

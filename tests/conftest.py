"""Shared test fixtures for relist."""

from __future__ import annotations

from typing import Any

import pytest

from relist.collection.store import ItemStore
from relist.display.broadcaster import ChangeBroadcaster
from relist.display.sink import MirrorSink, RecordingSink


class ExplodingSink:
    """Sink that raises on its ``fail_on``-th notification (1-based)."""

    def __init__(self, fail_on: int, exc: Exception | None = None) -> None:
        self.fail_on = fail_on
        self.exc = exc if exc is not None else RuntimeError("sink exploded")
        self.seen = 0

    def notify(self, change: Any) -> None:
        self.seen += 1
        if self.seen == self.fail_on:
            raise self.exc


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_store(sink: RecordingSink):
    """Factory for a store wired to the shared recording sink."""

    def factory(items: list[Any] | None = None, **kwargs: Any) -> ItemStore[Any]:
        return ItemStore(items, sink=sink, **kwargs)

    return factory


def watched_store(
    items: list[Any], **kwargs: Any
) -> tuple[ItemStore[Any], RecordingSink, MirrorSink]:
    """Create a store whose changes go to both a recorder and a mirror.

    The mirror replays notifications only, so comparing it with the store
    checks that every mutation was reported exactly once and in order.
    """
    broadcaster = ChangeBroadcaster()
    store: ItemStore[Any] = ItemStore(items, sink=broadcaster, **kwargs)
    recorder = RecordingSink()
    mirror = MirrorSink(store)
    broadcaster.subscribe(recorder)
    broadcaster.subscribe(mirror)
    return store, recorder, mirror

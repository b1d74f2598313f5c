"""Change broadcaster — fans one store's notifications out to many sinks.

A store talks to exactly one sink. When several consumers need the same
change stream (a list widget, a mirror used for assertions, an audit
recorder), install a ``ChangeBroadcaster`` as the store's sink and
subscribe the consumers to it.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relist.collection.changes import ListChange
    from relist.display.sink import ChangeSink


class ChangeBroadcaster:
    """Delivers each notification to every subscriber in subscription order.

    Thread-safe subscriber list: subscribe/unsubscribe may be called from
    any thread. Delivery itself runs on the store's (single) writer thread
    against a snapshot of the subscribers taken when the change arrives.

    A subscriber that raises stops delivery of that change to later
    subscribers and the exception propagates to the mutating call.

    """

    def __init__(self) -> None:
        self._subscribers: list[ChangeSink] = []
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        """Number of subscribed sinks."""
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, sink: ChangeSink) -> None:
        """Add a sink. Subscribing the same sink twice is a no-op."""
        with self._lock:
            if not any(s is sink for s in self._subscribers):
                self._subscribers.append(sink)

    def unsubscribe(self, sink: ChangeSink) -> None:
        """Remove a sink if subscribed."""
        with self._lock:
            self._subscribers = [s for s in self._subscribers if s is not sink]

    def get_subscribers(self) -> tuple[ChangeSink, ...]:
        """Snapshot of current subscribers (no lock held on return)."""
        with self._lock:
            return tuple(self._subscribers)

    def notify(self, change: ListChange) -> None:
        for sink in self.get_subscribers():
            sink.notify(change)

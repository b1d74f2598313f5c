"""Event log — bounded history of what a store did.

Holds the most recent ``StoreEvent`` objects (bulk loads, completed and
failed reconciles, phase profiles) so a host or a test can ask questions
such as "which phase failed last?" or "how many mutations did reconciling
cost so far?".

Thread Safety:
    Every method takes the log's ``threading.Lock``. The store records
    from its writer thread; the log may be read from any other.

"""

import threading
from collections import deque
from typing import Any

from relist.observability.events import (
    BulkLoaded,
    ReconcileCompleted,
    ReconcileFailed,
    StoreEvent,
)


class EventLog:
    """Ring buffer of store events, oldest dropped first.

    Args:
        max_events: Number of events kept.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[StoreEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    @property
    def max_events(self) -> int:
        return self._events.maxlen or 0

    def append(self, event: StoreEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        kind: str | None = None,
        phase: str | None = None,
        since_ns: int = 0,
        limit: int = 100,
    ) -> list[StoreEvent]:
        """Return matching events, newest first.

        Args:
            event_type: Keep only events of this class.
            kind: Keep only ``BulkLoaded`` events of this kind
                (``"append"``, ``"replace"`` or ``"clear"``).
            phase: Keep only ``ReconcileFailed`` events from this phase.
            since_ns: Keep only events stamped at or after this time.
            limit: At most this many events.

        """
        with self._lock:
            snapshot = list(self._events)
        matched: list[StoreEvent] = []
        for event in reversed(snapshot):
            if len(matched) == limit:
                break
            if event.timestamp_ns < since_ns:
                continue
            if event_type is not None and not isinstance(event, event_type):
                continue
            if kind is not None and not (isinstance(event, BulkLoaded) and event.kind == kind):
                continue
            if phase is not None and not (
                isinstance(event, ReconcileFailed) and event.phase == phase
            ):
                continue
            matched.append(event)
        return matched

    def recent(self, n: int = 20) -> list[StoreEvent]:
        """The last ``n`` events, oldest first."""
        with self._lock:
            return list(self._events)[-n:]

    def clear(self) -> int:
        """Drop every event; return how many there were."""
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Summarise the retained events.

        ``failures`` counts failed reconciles and ``mutations`` sums the
        removals, insertions and moves of completed ones.
        """
        with self._lock:
            snapshot = list(self._events)
        by_type: dict[str, int] = {}
        failures = 0
        mutations = 0
        for event in snapshot:
            name = type(event).__name__
            by_type[name] = by_type.get(name, 0) + 1
            if isinstance(event, ReconcileFailed):
                failures += 1
            elif isinstance(event, ReconcileCompleted):
                mutations += event.removed + event.inserted + event.moved
        return {
            "total": len(snapshot),
            "max_events": self.max_events,
            "by_type": by_type,
            "failures": failures,
            "mutations": mutations,
        }

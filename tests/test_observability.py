"""Tests for relist.observability — event log and list collector."""

import threading

from relist.collection.store import ItemStore
from relist.config import RelistConfig
from relist.observability.collector import ListCollector
from relist.observability.events import (
    BulkLoaded,
    ReconcileCompleted,
    ReconcileFailed,
    ReconcileProfile,
    now_ns,
)
from relist.observability.log import EventLog


def _bulk(count: int = 1) -> BulkLoaded:
    return BulkLoaded(kind="append", count=count, size=count, timestamp_ns=now_ns())


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_bulk())
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_bulk(i))
        assert len(log) == 5
        assert log.recent(1)[0].count == 9

    def test_max_events_property(self) -> None:
        assert EventLog(max_events=7).max_events == 7

    def test_recent(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_bulk(i))
        recent = log.recent(3)
        assert [e.count for e in recent] == [2, 3, 4]

    def test_query_by_type_newest_first(self) -> None:
        log = EventLog()
        log.append(_bulk(1))
        log.append(ReconcileCompleted(
            removed=1, inserted=0, moved=0, size=0,
            duration_ms=0.1, timestamp_ns=now_ns(),
        ))
        log.append(_bulk(2))

        results = log.query(event_type=BulkLoaded)
        assert [e.count for e in results] == [2, 1]

    def test_query_since_and_limit(self) -> None:
        log = EventLog()
        log.append(BulkLoaded(kind="append", count=1, size=1, timestamp_ns=100))
        log.append(BulkLoaded(kind="append", count=2, size=2, timestamp_ns=200))
        log.append(BulkLoaded(kind="append", count=3, size=3, timestamp_ns=300))

        assert [e.count for e in log.query(since_ns=200)] == [3, 2]
        assert [e.count for e in log.query(limit=1)] == [3]

    def test_clear(self) -> None:
        log = EventLog()
        for i in range(3):
            log.append(_bulk(i))
        assert log.clear() == 3
        assert len(log) == 0

    def test_stats(self) -> None:
        log = EventLog(max_events=50)
        log.append(_bulk())
        log.append(ReconcileFailed(
            phase="moves", error="RuntimeError()", removed=0,
            inserted=0, moved=1, timestamp_ns=now_ns(),
        ))
        log.append(ReconcileCompleted(
            removed=2, inserted=1, moved=3, size=4,
            duration_ms=0.1, timestamp_ns=now_ns(),
        ))
        stats = log.stats()
        assert stats["total"] == 3
        assert stats["max_events"] == 50
        assert stats["by_type"] == {
            "BulkLoaded": 1,
            "ReconcileFailed": 1,
            "ReconcileCompleted": 1,
        }
        assert stats["failures"] == 1
        assert stats["mutations"] == 6

    def test_query_by_bulk_kind(self) -> None:
        log = EventLog()
        log.append(BulkLoaded(kind="append", count=1, size=1, timestamp_ns=1))
        log.append(BulkLoaded(kind="clear", count=1, size=0, timestamp_ns=2))
        log.append(ReconcileCompleted(
            removed=0, inserted=0, moved=0, size=0,
            duration_ms=0.0, timestamp_ns=3,
        ))
        assert [e.kind for e in log.query(kind="clear")] == ["clear"]
        assert log.query(kind="replace") == []

    def test_query_by_failed_phase(self) -> None:
        log = EventLog()
        for phase in ("removals", "moves", "moves"):
            log.append(ReconcileFailed(
                phase=phase, error="RuntimeError()", removed=0,
                inserted=0, moved=0, timestamp_ns=now_ns(),
            ))
        log.append(_bulk())
        assert len(log.query(phase="moves")) == 2
        assert len(log.query(phase="additions")) == 0

    def test_thread_safety(self) -> None:
        """Concurrent appends should not lose events."""
        log = EventLog(max_events=50_000)
        errors: list[Exception] = []

        def worker() -> None:
            try:
                for _ in range(1000):
                    log.append(_bulk())
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(log) == 10_000


# ---------------------------------------------------------------------------
# ListCollector
# ---------------------------------------------------------------------------


class TestListCollector:
    """Tests for the collector and its wiring into the store."""

    def test_default_log(self) -> None:
        assert isinstance(ListCollector().log, EventLog)

    def test_from_config(self) -> None:
        collector = ListCollector.from_config(RelistConfig(max_events=2))
        for _ in range(5):
            collector.record_bulk_load("append", count=1, size=1)
        assert len(collector.log) == 2

    def test_record_failure_uses_repr(self) -> None:
        collector = ListCollector()
        collector.record_failure("additions", ValueError("bad"), inserted=2)
        event = collector.log.recent(1)[0]
        assert isinstance(event, ReconcileFailed)
        assert event.error == "ValueError('bad')"
        assert event.inserted == 2

    def test_record_profile(self) -> None:
        collector = ListCollector()
        profile = ReconcileProfile(
            removals_ms=0.1, additions_ms=0.2, moves_ms=0.3,
            total_ms=0.7, mutations=2, timestamp_ns=now_ns(),
        )
        collector.record_profile(profile)
        assert collector.log.query(event_type=ReconcileProfile) == [profile]

    def test_bulk_loaders_recorded(self) -> None:
        collector = ListCollector()
        store = ItemStore(["a"], collector=collector)
        store.insert_items(["b", "c"])
        store.insert_ignore_items(["x", "y", "z", "w"])
        store.clear_items()
        store.clear_items()

        events = collector.log.query(event_type=BulkLoaded)
        assert [(e.kind, e.count, e.size) for e in reversed(events)] == [
            ("append", 2, 3),
            ("replace", 4, 4),
            ("clear", 4, 0),
        ]

    def test_silent_loads_not_recorded(self) -> None:
        collector = ListCollector()
        store = ItemStore(collector=collector)
        store.insert_items([])
        store.insert_ignore_items([])
        store.clear_items()
        assert len(collector.log) == 0

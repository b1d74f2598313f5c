"""Store observability — structured events about what a store did.

Records bulk loads and reconciliation runs (completed, failed, profiled)
into a bounded, queryable event log.

Quick Start:
    >>> from relist.observability import ListCollector
    >>> from relist.collection.store import ItemStore
    >>> collector = ListCollector()
    >>> store = ItemStore(collector=collector)
    >>> _ = store.animate_to(["a", "b"])
    >>> len(collector.log)
    1

"""

from relist.observability.collector import ListCollector
from relist.observability.events import (
    BulkLoaded,
    ReconcileCompleted,
    ReconcileFailed,
    ReconcileProfile,
    StoreEvent,
    now_ns,
)
from relist.observability.log import EventLog
from relist.observability.profiler import ReconcileProfiler, compute_aggregate_stats

__all__ = [
    "BulkLoaded",
    "EventLog",
    "ListCollector",
    "ReconcileCompleted",
    "ReconcileFailed",
    "ReconcileProfile",
    "ReconcileProfiler",
    "StoreEvent",
    "compute_aggregate_stats",
    "now_ns",
]

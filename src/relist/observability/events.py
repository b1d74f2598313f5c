"""Event model for store observability.

Defines event types for bulk loads and reconciliation runs.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Bulk loader events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BulkLoaded:
    """A bulk loader replaced or extended the sequence.

    Attributes:
        kind: Which loader ran.
        count: Number of items inserted (or removed, for ``clear``).
        size: Sequence size after the load.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: Literal["append", "replace", "clear"]
    count: int
    size: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Reconciler events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ReconcileCompleted:
    """``animate_to`` converged on its target.

    Attributes:
        removed: Items removed in the removals phase.
        inserted: Items inserted in the additions phase.
        moved: Items moved in the moves phase.
        size: Sequence size after reconciliation.
        duration_ms: Wall time of the whole run.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    removed: int
    inserted: int
    moved: int
    size: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ReconcileFailed:
    """``animate_to`` stopped part-way because something raised.

    Attributes:
        phase: Phase that was running when the error occurred.
        error: ``repr`` of the exception.
        removed: Removals applied before the failure.
        inserted: Insertions applied before the failure.
        moved: Moves applied before the failure.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    phase: Literal["removals", "additions", "moves"]
    error: str
    removed: int
    inserted: int
    moved: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ReconcileProfile:
    """Per-phase timing for one reconciliation run.

    Attributes:
        removals_ms: Time in the removals phase.
        additions_ms: Time in the additions phase.
        moves_ms: Time in the moves phase.
        total_ms: End-to-end time.
        mutations: Total primitive mutations applied.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    removals_ms: float
    additions_ms: float
    moves_ms: float
    total_ms: float
    mutations: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type StoreEvent = BulkLoaded | ReconcileCompleted | ReconcileFailed | ReconcileProfile


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()

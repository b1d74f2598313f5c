"""List collector — records what a store did into an event log.

A store owns at most one collector. The reconciler and bulk loaders
report through it; nothing is recorded when no collector is attached.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked,
    so the log can be inspected from another thread while the store's
    writer keeps recording.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relist.observability.events import (
    BulkLoaded,
    ReconcileCompleted,
    ReconcileFailed,
    ReconcileProfile,
    now_ns,
)
from relist.observability.log import EventLog

if TYPE_CHECKING:
    from relist.config import RelistConfig


class ListCollector:
    """Event collector for one ``ItemStore``.

    Args:
        log: The EventLog to store events in. A fresh one is created
            when omitted.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @classmethod
    def from_config(cls, config: RelistConfig) -> ListCollector:
        """Create a collector whose log holds ``config.max_events`` events."""
        return cls(EventLog(max_events=config.max_events))

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Bulk loaders -----

    def record_bulk_load(self, kind: str, *, count: int = 0, size: int = 0) -> None:
        """Record an append, replace or clear."""
        self._log.append(
            BulkLoaded(
                kind=kind,  # type: ignore[arg-type]
                count=count,
                size=size,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Reconciler -----

    def record_reconcile(
        self,
        *,
        removed: int = 0,
        inserted: int = 0,
        moved: int = 0,
        size: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a reconciliation run that reached its target."""
        self._log.append(
            ReconcileCompleted(
                removed=removed,
                inserted=inserted,
                moved=moved,
                size=size,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_failure(
        self,
        phase: str,
        error: BaseException,
        *,
        removed: int = 0,
        inserted: int = 0,
        moved: int = 0,
    ) -> None:
        """Record a reconciliation run that stopped on an exception."""
        self._log.append(
            ReconcileFailed(
                phase=phase,  # type: ignore[arg-type]
                error=repr(error),
                removed=removed,
                inserted=inserted,
                moved=moved,
                timestamp_ns=now_ns(),
            )
        )

    def record_profile(self, profile: ReconcileProfile) -> None:
        """Record a finished per-phase timing profile."""
        self._log.append(profile)

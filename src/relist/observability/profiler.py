"""Reconcile profiler — measures how long each reconciler phase takes.

Records per-phase timing for each ``animate_to`` run and emits
``ReconcileProfile`` events to the ``EventLog``.

Thread Safety:
    The profiler is used from the store's writer thread (single-writer).
    Aggregate queries are protected by the underlying ``EventLog`` lock.

"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from relist.observability.events import ReconcileProfile, now_ns

if TYPE_CHECKING:
    from relist.observability.log import EventLog

PHASES = ("removals", "additions", "moves")


@dataclass(slots=True)
class _Timer:
    """Accumulates timing for a named phase."""

    name: str
    _start: float = 0.0
    elapsed_ms: float = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> None:
        if self._start > 0:
            self.elapsed_ms = (time.perf_counter() - self._start) * 1000
            self._start = 0.0


class ReconcileProfiler:
    """Records per-phase timing for a single reconciliation.

    Usage::

        profiler = ReconcileProfiler(event_log)

        profiler.begin()
        profiler.start("removals")
        # ... phase 1 ...
        profiler.stop("removals")
        profiler.finish(mutations=3)

    After ``finish()``, a ``ReconcileProfile`` event is appended to the log
    (when there is one) and, if verbose, a one-line summary is printed to
    stderr.

    """

    __slots__ = ("_log", "_t0", "_timers", "_verbose")

    def __init__(self, log: EventLog | None = None, *, verbose: bool = True) -> None:
        self._log = log
        self._verbose = verbose
        self._t0 = 0.0
        self._timers: dict[str, _Timer] = {name: _Timer(name=name) for name in PHASES}

    def begin(self) -> None:
        """Start profiling a new reconciliation."""
        self._t0 = time.perf_counter()
        for timer in self._timers.values():
            timer.elapsed_ms = 0.0

    def start(self, phase: str) -> None:
        """Start timing a named phase."""
        timer = self._timers.get(phase)
        if timer is not None:
            timer.start()

    def stop(self, phase: str) -> None:
        """Stop timing a named phase."""
        timer = self._timers.get(phase)
        if timer is not None:
            timer.stop()

    def finish(self, *, mutations: int = 0) -> ReconcileProfile:
        """Finish profiling and emit the ``ReconcileProfile`` event.

        Returns the profile for testing / inspection.

        """
        total_ms = (time.perf_counter() - self._t0) * 1000 if self._t0 > 0 else 0.0

        profile = ReconcileProfile(
            removals_ms=self._timers["removals"].elapsed_ms,
            additions_ms=self._timers["additions"].elapsed_ms,
            moves_ms=self._timers["moves"].elapsed_ms,
            total_ms=total_ms,
            mutations=mutations,
            timestamp_ns=now_ns(),
        )

        if self._log is not None:
            self._log.append(profile)

        if self._verbose:
            self._print_summary(profile)

        return profile

    def _print_summary(self, p: ReconcileProfile) -> None:
        """Print a one-line timing summary to stderr."""
        noun = "mutation" if p.mutations == 1 else "mutations"
        phases = (
            f"removals: {p.removals_ms:.1f}ms, "
            f"additions: {p.additions_ms:.1f}ms, "
            f"moves: {p.moves_ms:.1f}ms"
        )
        print(
            f"  [{p.total_ms:.1f}ms] animate_to -> {p.mutations} {noun} ({phases})",
            file=sys.stderr,
        )


def compute_aggregate_stats(
    log: EventLog,
    *,
    limit: int = 100,
) -> dict:
    """Compute aggregate latency statistics from recent ``ReconcileProfile`` events.

    Returns a dict with p50, p95, p99, and per-phase averages.

    """
    profiles = log.query(event_type=ReconcileProfile, limit=limit)
    if not profiles:
        return {"count": 0}

    totals = sorted(p.total_ms for p in profiles)
    count = len(totals)

    def percentile(data: list[float], pct: float) -> float:
        idx = int(len(data) * pct / 100)
        return data[min(idx, len(data) - 1)]

    return {
        "count": count,
        "total_ms": {
            "p50": round(percentile(totals, 50), 3),
            "p95": round(percentile(totals, 95), 3),
            "p99": round(percentile(totals, 99), 3),
            "min": round(totals[0], 3),
            "max": round(totals[-1], 3),
        },
        "avg_by_phase_ms": {
            "removals": round(sum(p.removals_ms for p in profiles) / count, 3),
            "additions": round(sum(p.additions_ms for p in profiles) / count, 3),
            "moves": round(sum(p.moves_ms for p in profiles) / count, 3),
        },
        "avg_mutations": round(sum(p.mutations for p in profiles) / count, 1),
    }

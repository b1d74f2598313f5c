"""Reconciler — drives a store to a target sequence one mutation at a time.

Given a store and a target, ``animate_to`` issues store primitives until the
store holds exactly the target (same items, order and multiplicity). Every
primitive notifies the store's sink, so a list view replaying the
notifications animates each removal, insertion and move.

Algorithm (three phases, each finished before the next starts):
    1. Removals — scan the store from last to first and remove items with
       no counterpart in the target. High-to-low keeps the unvisited lower
       positions valid.
    2. Additions — scan the target from first to last and insert at the
       same position every target item with no counterpart in the store.
    3. Moves — scan the target from last to first; for each position find
       the matching store item among the still-unplaced prefix and move it
       into place. Positions above the current one are already final.

Counterparts are matched per occurrence. A value that appears ``t`` times
in the target keeps its first ``t`` occurrences in the store and loses the
rest; the ``k``-th target occurrence is inserted only while the store holds
fewer than ``k`` copies. In the moves phase an item already equal to the
target at ``to_position`` stays put, otherwise the first match from the left
is taken. With unique items this is plain ``contains``/``index_of``.

This does not minimise the number of moves. Lookups are linear scans,
``O(n·m)``; the ``"hashed"`` lookup counts values in dictionaries for the
first two phases and is only used when every item is hashable.

"""

from __future__ import annotations

import sys
import time
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from relist.observability.profiler import ReconcileProfiler

if TYPE_CHECKING:
    from relist._types import Phase
    from relist.collection.store import ItemStore
    from relist.config import RelistConfig


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """How far a reconciliation got.

    Attributes:
        removed: Removals applied.
        inserted: Insertions applied.
        moved: Moves applied.
        error: The exception that stopped the run, or None on success.
        phase: The phase that raised, or None on success.

    """

    removed: int = 0
    inserted: int = 0
    moved: int = 0
    error: Exception | None = None
    phase: Phase | None = None

    @property
    def completed(self) -> bool:
        """True when every phase ran to the end."""
        return self.error is None

    @property
    def mutations(self) -> int:
        """Total primitive mutations applied."""
        return self.removed + self.inserted + self.moved


@dataclass(slots=True)
class _Progress:
    """Per-phase mutation tallies, filled in even when a phase raises."""

    removed: int = 0
    inserted: int = 0
    moved: int = 0
    phase: Phase = "removals"

    def result(self, error: Exception | None = None) -> ReconcileResult:
        return ReconcileResult(
            removed=self.removed,
            inserted=self.inserted,
            moved=self.moved,
            error=error,
            phase=self.phase if error is not None else None,
        )


def animate_to[M](
    store: ItemStore[M],
    target: Iterable[M],
    *,
    config: RelistConfig | None = None,
) -> ReconcileResult:
    """Reconcile ``store`` against ``target``.

    Best effort by default: an exception from a primitive or from the sink
    stops the run, is reported on stderr and recorded on the store's
    collector, and comes back in ``ReconcileResult.error``. Mutations
    already applied stay applied. With ``config.strict`` the exception is
    re-raised after it has been recorded.

    Args:
        store: The store to mutate.
        target: The sequence the store should end up equal to. Consumed
            once; not retained.
        config: Overrides ``store.config`` for this run.

    Returns:
        Counts of the mutations applied and, on failure, the error.

    """
    cfg = config if config is not None else store.config
    wanted = list(target)
    hashed = cfg.lookup == "hashed" and _all_hashable(store, wanted)
    progress = _Progress()
    collector = store.collector

    profiler: ReconcileProfiler | None = None
    if cfg.profile:
        profiler = ReconcileProfiler(verbose=True)
        profiler.begin()

    t0 = time.perf_counter()
    try:
        for phase, counter, run in _PHASES:
            progress.phase = phase
            start = store.version
            try:
                _timed(profiler, phase, run, store, wanted, hashed)
            finally:
                setattr(progress, counter, store.version - start)
    except Exception as exc:
        if cfg.report_errors:
            print(
                f"  Reconcile error ({progress.phase}): {exc!r}",
                file=sys.stderr,
            )
        if collector is not None:
            collector.record_failure(
                progress.phase,
                exc,
                removed=progress.removed,
                inserted=progress.inserted,
                moved=progress.moved,
            )
        if cfg.strict:
            raise
        return progress.result(error=exc)

    result = progress.result()
    if collector is not None:
        collector.record_reconcile(
            removed=result.removed,
            inserted=result.inserted,
            moved=result.moved,
            size=len(store),
            duration_ms=(time.perf_counter() - t0) * 1000,
        )
    if profiler is not None:
        profile = profiler.finish(mutations=result.mutations)
        if collector is not None:
            collector.record_profile(profile)
    return result


def _timed(
    profiler: ReconcileProfiler | None,
    phase: str,
    run: Callable[..., None],
    *args: object,
) -> None:
    if profiler is None:
        run(*args)
        return
    profiler.start(phase)
    try:
        run(*args)
    finally:
        profiler.stop(phase)


def _all_hashable(store: ItemStore, target: list) -> bool:
    try:
        Counter(target)
        Counter(store)
    except TypeError:
        return False
    return True


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------


def _apply_removals(store: ItemStore, target: list, hashed: bool) -> None:
    """Phase 1: drop store items beyond their target multiplicity."""
    if hashed:
        allowed = Counter(target)
        # Occurrences of each value at or below the scan position.
        below = Counter(store)
    for position in range(len(store) - 1, -1, -1):
        item = store[position]
        if hashed:
            occurrence = below[item]
            below[item] -= 1
            limit = allowed[item]
        else:
            occurrence = store.count(item, stop=position + 1)
            limit = target.count(item)
        if occurrence > limit:
            store.remove_item(position)


def _apply_additions(store: ItemStore, target: list, hashed: bool) -> None:
    """Phase 2: insert target items the store has no copy of yet."""
    if hashed:
        held = Counter(store)
        seen: Counter = Counter()
    for position, item in enumerate(target):
        if hashed:
            seen[item] += 1
            missing = held[item] < seen[item]
        else:
            missing = store.count(item) < target[:position + 1].count(item)
        if missing:
            store.insert_item(item, position)
            if hashed:
                held[item] += 1


def _apply_moves(store: ItemStore, target: list, hashed: bool) -> None:
    """Phase 3: move items into place, fixing positions from the end.

    Always a linear scan of the unplaced prefix; ``hashed`` is unused.
    """
    for to_position in range(len(target) - 1, -1, -1):
        item = target[to_position]
        if store[to_position] == item:
            continue
        from_position = store.index_of(item, stop=to_position)
        if from_position >= 0:
            store.move_item(from_position, to_position)


_PHASES: tuple[tuple[Phase, str, Callable[[ItemStore, list, bool], None]], ...] = (
    ("removals", "removed", _apply_removals),
    ("additions", "inserted", _apply_additions),
    ("moves", "moved", _apply_moves),
)

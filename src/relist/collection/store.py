"""Ordered item store — the mutable sequence behind a list display.

The store owns one ordered list of items and is the only thing allowed to
change it. Every structural mutation goes through a primitive
(``insert_item``, ``remove_item``, ``move_item``) or a bulk loader built on
the same rules, and every mutation is followed immediately by exactly one
notification to the store's sink describing it.

Invariants:
    - Positions are contiguous ``0..size-1``.
    - Length changes only through insertions and removals; order changes
      only through moves.
    - The mutation is applied before its notification is sent, so a sink
      may read the store while handling the notification.

Thread Safety:
    None. The store assumes a single writer; callers serialise every
    mutating call (including ``animate_to``).

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from relist._errors import IndexOutOfRange, ShrinkingReplacement
from relist.collection.changes import (
    ItemChanged,
    ItemInserted,
    ItemMoved,
    ItemRangeInserted,
    ItemRangeRemoved,
    ItemRemoved,
    ListChange,
)
from relist.collection.reconciler import ReconcileResult, animate_to
from relist.config import RelistConfig

if TYPE_CHECKING:
    from relist.display.sink import ChangeSink
    from relist.observability.collector import ListCollector


class ItemStore[M]:
    """Ordered, index-addressable, mutable sequence of items.

    Args:
        items: Initial items (copied). Loading them sends no notification.
        sink: Receiver of change notifications. Defaults to ``NullSink``.
        config: Reconciler behaviour. Defaults to ``RelistConfig()``.
        collector: Optional event collector for bulk loads and reconciles.

    """

    def __init__(
        self,
        items: Iterable[M] | None = None,
        *,
        sink: ChangeSink | None = None,
        config: RelistConfig | None = None,
        collector: ListCollector | None = None,
    ) -> None:
        from relist.display.sink import NullSink

        self._items: list[M] = list(items) if items is not None else []
        self.sink: ChangeSink = sink if sink is not None else NullSink()
        self.config = config if config is not None else RelistConfig()
        self.collector = collector
        self._version = 0

    # ----- Read access -----

    @property
    def size(self) -> int:
        """Number of items currently held."""
        return len(self._items)

    @property
    def version(self) -> int:
        """Number of mutations applied so far, bumped before each notification."""
        return self._version

    @property
    def items(self) -> tuple[M, ...]:
        """Snapshot of the current items."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> M:
        return self._items[position]

    def __iter__(self) -> Iterator[M]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def count(self, item: object, stop: int | None = None) -> int:
        """Number of items equal to ``item``, optionally among the first ``stop``."""
        if stop is None:
            return self._items.count(item)
        return self._items[:stop].count(item)

    def index_of(self, item: object, stop: int | None = None) -> int:
        """Position of the first item equal to ``item`` before ``stop``, or -1."""
        end = len(self._items) if stop is None else stop
        try:
            return self._items.index(item, 0, end)
        except ValueError:
            return -1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # ----- Primitives -----

    def insert_item(self, item: M, position: int | None = None) -> None:
        """Insert ``item`` at ``position`` (default: append).

        Raises:
            IndexOutOfRange: If ``position`` is not in ``[0, size]``.

        """
        size = len(self._items)
        if position is None:
            position = size
        elif not 0 <= position <= size:
            raise IndexOutOfRange("insert_item", position, size, inclusive=True)
        self._items.insert(position, item)
        self._notify(ItemInserted(position))

    def remove_item(self, position: int) -> M:
        """Remove and return the item at ``position``.

        Raises:
            IndexOutOfRange: If ``position`` is not in ``[0, size)``.

        """
        self._check_position("remove_item", position)
        item = self._items.pop(position)
        self._notify(ItemRemoved(position))
        return item

    def move_item(self, from_position: int, to_position: int) -> None:
        """Move the item at ``from_position`` so it rests at ``to_position``.

        ``to_position`` is the final index, i.e. it is applied to the
        sequence after the item has been taken out. A move onto itself is
        still reported.

        Raises:
            IndexOutOfRange: If either position is not in ``[0, size)``.

        """
        self._check_position("move_item", from_position)
        self._check_position("move_item", to_position)
        item = self._items.pop(from_position)
        self._items.insert(to_position, item)
        self._notify(ItemMoved(from_position, to_position))

    def replace_item(self, position: int, item: M) -> M:
        """Swap in a new value at ``position`` and return the old one."""
        self._check_position("replace_item", position)
        old = self._items[position]
        self._items[position] = item
        self._notify(ItemChanged(position))
        return old

    def notify_item_changed(self, position: int) -> None:
        """Report that the item at ``position`` changed in place."""
        self._check_position("notify_item_changed", position)
        self._notify(ItemChanged(position))

    # ----- Bulk loaders -----

    def insert_items(self, items: Iterable[M]) -> None:
        """Append every item, reported as one range insertion.

        Appending nothing mutates nothing and notifies nothing.
        """
        new_items = list(items)
        if not new_items:
            return
        start = len(self._items)
        self._items.extend(new_items)
        self._notify(ItemRangeInserted(start, len(new_items)))
        self._record_bulk("append", len(new_items))

    def insert_ignore_items(self, items: Iterable[M]) -> None:
        """Replace the whole sequence with ``items`` without diffing.

        Cheap bulk replace for feeds that only ever grow: the old span is
        reported removed and the new span inserted. Values that changed
        inside the old span are not detected.

        Raises:
            ShrinkingReplacement: If ``items`` is shorter than the current
                sequence. Nothing is mutated in that case.

        """
        replacement = list(items)
        size = len(self._items)
        if len(replacement) < size:
            raise ShrinkingReplacement(size, len(replacement))
        if size:
            self._items.clear()
            self._notify(ItemRangeRemoved(0, size))
        if replacement:
            self._items.extend(replacement)
            self._notify(ItemRangeInserted(0, len(replacement)))
        if size or replacement:
            self._record_bulk("replace", len(replacement))

    def clear_items(self) -> None:
        """Remove every item, reported as one range removal (none when empty)."""
        size = len(self._items)
        if size == 0:
            return
        self._items.clear()
        self._notify(ItemRangeRemoved(0, size))
        self._record_bulk("clear", size)

    # ----- Reconciliation -----

    def animate_to(self, target: Iterable[M]) -> ReconcileResult:
        """Mutate this store step by step until it equals ``target``.

        See ``relist.collection.reconciler.animate_to``.
        """
        return animate_to(self, target)

    # ----- Internals -----

    def _check_position(self, operation: str, position: int) -> None:
        size = len(self._items)
        if not 0 <= position < size:
            raise IndexOutOfRange(operation, position, size)

    def _notify(self, change: ListChange) -> None:
        self._version += 1
        self.sink.notify(change)

    def _record_bulk(self, kind: str, count: int) -> None:
        if self.collector is not None:
            self.collector.record_bulk_load(kind, count=count, size=len(self._items))

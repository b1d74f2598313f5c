"""Change sinks — consumers of structural change notifications.

A sink is anything with a ``notify(change)`` method. The store calls it
synchronously, once per mutation, after the mutation is visible. Hosts
normally forward the change to their list widget; the sinks here cover
the common non-UI needs:

- ``NullSink``: discards everything (the store's default).
- ``RecordingSink``: keeps the full change script for inspection.
- ``MirrorSink``: replays every change onto its own list, reading inserted
  and changed items back from the source the way a list view would.

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from relist.collection.changes import (
    ItemChanged,
    ItemInserted,
    ItemMoved,
    ItemRangeInserted,
    ItemRangeRemoved,
    ItemRemoved,
    ListChange,
)


class ChangeSink(Protocol):
    """Receives one notification per structural mutation, in order."""

    def notify(self, change: ListChange) -> None: ...


class NullSink:
    """Sink that ignores every notification."""

    __slots__ = ()

    def notify(self, change: ListChange) -> None:
        return None


class RecordingSink:
    """Sink that records every notification it receives."""

    __slots__ = ("changes",)

    def __init__(self) -> None:
        self.changes: list[ListChange] = []

    def notify(self, change: ListChange) -> None:
        self.changes.append(change)

    def clear(self) -> None:
        self.changes.clear()

    def __len__(self) -> int:
        return len(self.changes)


class MirrorSink:
    """Keeps a copy of a source sequence in sync purely from notifications.

    Removals and moves are applied to the mirror's own list; insertions
    and changes read the new values from ``source`` at the notified
    positions, which is valid because the store mutates before it
    notifies.

    Args:
        source: The sequence being mirrored (usually an ``ItemStore``).

    """

    __slots__ = ("_items", "_source")

    def __init__(self, source: Sequence[Any]) -> None:
        self._source = source
        self._items: list[Any] = list(source)

    @property
    def items(self) -> list[Any]:
        """A copy of the mirrored list."""
        return list(self._items)

    def notify(self, change: ListChange) -> None:
        if isinstance(change, ItemInserted):
            self._items.insert(change.position, self._source[change.position])
        elif isinstance(change, ItemRangeInserted):
            end = change.start + change.count
            self._items[change.start:change.start] = [
                self._source[i] for i in range(change.start, end)
            ]
        elif isinstance(change, ItemRemoved):
            del self._items[change.position]
        elif isinstance(change, ItemRangeRemoved):
            del self._items[change.start:change.start + change.count]
        elif isinstance(change, ItemMoved):
            item = self._items.pop(change.from_position)
            self._items.insert(change.to_position, item)
        elif isinstance(change, ItemChanged):
            self._items[change.position] = self._source[change.position]
        else:
            msg = f"Not a list change: {change!r}"
            raise TypeError(msg)

    def __len__(self) -> int:
        return len(self._items)

"""Structural change notifications.

One notification describes exactly one mutation of an ``ItemStore``.
Positions always refer to the sequence as it stands *after* the mutation
for insertions and *before* it for removals, matching what a mirroring
list needs to replay the change.

All notifications are frozen dataclasses, hashable and comparable via ``==``,
so tests can assert on whole scripts of changes.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ItemInserted:
    """A single item was inserted at ``position``."""

    position: int


@dataclass(frozen=True, slots=True)
class ItemRangeInserted:
    """``count`` items were inserted starting at ``start``."""

    start: int
    count: int


@dataclass(frozen=True, slots=True)
class ItemRemoved:
    """The item at ``position`` was removed."""

    position: int


@dataclass(frozen=True, slots=True)
class ItemRangeRemoved:
    """``count`` items starting at ``start`` were removed."""

    start: int
    count: int


@dataclass(frozen=True, slots=True)
class ItemMoved:
    """The item at ``from_position`` now rests at ``to_position``.

    ``to_position`` is the final index, computed against the sequence after
    the item was taken out.

    """

    from_position: int
    to_position: int


@dataclass(frozen=True, slots=True)
class ItemChanged:
    """The item at ``position`` changed content but not place."""

    position: int


type ListChange = (
    ItemInserted
    | ItemRangeInserted
    | ItemRemoved
    | ItemRangeRemoved
    | ItemMoved
    | ItemChanged
)


def describe(change: ListChange) -> str:
    """Return a short human-readable form, e.g. ``move 2 -> 0``."""
    if isinstance(change, ItemInserted):
        return f"insert {change.position}"
    if isinstance(change, ItemRangeInserted):
        return f"insert {change.start}+{change.count}"
    if isinstance(change, ItemRemoved):
        return f"remove {change.position}"
    if isinstance(change, ItemRangeRemoved):
        return f"remove {change.start}+{change.count}"
    if isinstance(change, ItemMoved):
        return f"move {change.from_position} -> {change.to_position}"
    if isinstance(change, ItemChanged):
        return f"change {change.position}"
    msg = f"Not a list change: {change!r}"
    raise TypeError(msg)

"""Collection layer — the ordered item store and its reconciler.

Primitive and bulk mutations live on ``ItemStore``; ``animate_to`` turns a
target sequence into a script of those mutations.
"""

from relist.collection.changes import (
    ItemChanged,
    ItemInserted,
    ItemMoved,
    ItemRangeInserted,
    ItemRangeRemoved,
    ItemRemoved,
    ListChange,
    describe,
)
from relist.collection.reconciler import ReconcileResult, animate_to
from relist.collection.store import ItemStore

__all__ = [
    "ItemChanged",
    "ItemInserted",
    "ItemMoved",
    "ItemRangeInserted",
    "ItemRangeRemoved",
    "ItemRemoved",
    "ItemStore",
    "ListChange",
    "ReconcileResult",
    "animate_to",
    "describe",
]

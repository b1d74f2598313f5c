"""Relist — an ordered item store that animates its way to a new list.

Keeps the items behind a list display and, given a new list, works out a
sequence of removals, insertions and moves that turns the old one into
the new one. Each step is reported to a sink as it happens so the display
can animate it instead of redrawing everything.

Quick start::

    from relist import ItemStore
    from relist.display import RecordingSink

    sink = RecordingSink()
    store = ItemStore(["a", "b", "c"], sink=sink)
    store.animate_to(["c", "a", "b"])
    sink.changes          # [ItemMoved(from_position=1, to_position=2),
                          #  ItemMoved(from_position=0, to_position=1)]

Layers::

    relist.collection     ItemStore, primitives, bulk loaders, animate_to
    relist.display        change sinks and a fan-out broadcaster
    relist.binding        ItemAdapter and the host view-binding contract
    relist.observability  event log, collector, phase profiler

"""

__version__ = "0.1.0"
__all__ = [
    "ItemAdapter",
    "ItemStore",
    "ReconcileResult",
    "RelistConfig",
    "__version__",
    "animate_to",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import relist`` cheap while providing a flat top-level API.
    """
    if name == "ItemStore":
        from relist.collection.store import ItemStore

        return ItemStore

    if name == "ItemAdapter":
        from relist.binding.adapter import ItemAdapter

        return ItemAdapter

    if name == "ReconcileResult":
        from relist.collection.reconciler import ReconcileResult

        return ReconcileResult

    if name == "animate_to":
        from relist.collection.reconciler import animate_to

        return animate_to

    if name == "RelistConfig":
        from relist.config import RelistConfig

        return RelistConfig

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

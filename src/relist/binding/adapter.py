"""Item adapter — an item store that also knows how to show its items.

``ItemAdapter`` is what a host list widget talks to: it answers how many
items there are and which view type each needs, creates views through the
host's ``ViewBinding``, and binds items into them. All structural changes
come from the ``ItemStore`` base, so the widget's sink sees the same
notifications.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from relist.binding.registry import BindRegistry
from relist.collection.store import ItemStore

if TYPE_CHECKING:
    from relist.binding.view_binding import Binding, ViewBinding
    from relist.config import RelistConfig
    from relist.display.sink import ChangeSink
    from relist.observability.collector import ListCollector


@dataclass
class ViewHolder[V]:
    """A created view plus what the adapter last bound into it.

    Attributes:
        binding: The host-created view pair.
        view_type: Type the view was created for.
        position: Position last bound, or -1 if never bound.

    """

    binding: Binding[V]
    view_type: int
    position: int = -1

    @property
    def view(self) -> V:
        return self.binding.view


class ItemAdapter[V, M](ItemStore[M]):
    """Item store wired to a host ``ViewBinding``.

    Args:
        view_binding: Host view factory and primary writer.
        items: Initial items (copied).
        registry: Per-view-type fallback writers.
        sink: Receiver of change notifications.
        config: Reconciler behaviour.
        collector: Optional event collector.

    """

    def __init__(
        self,
        view_binding: ViewBinding[V, M],
        items: Iterable[M] | None = None,
        *,
        registry: BindRegistry | None = None,
        sink: ChangeSink | None = None,
        config: RelistConfig | None = None,
        collector: ListCollector | None = None,
    ) -> None:
        super().__init__(items, sink=sink, config=config, collector=collector)
        self.view_binding = view_binding
        self.registry = registry if registry is not None else BindRegistry()

    @property
    def item_count(self) -> int:
        """Number of items the host should display."""
        return len(self)

    def item_view_type(self, position: int) -> int:
        """View type for the item at ``position``."""
        return self.view_binding.type(position)

    def create_view_holder(self, parent: Any, view_type: int) -> ViewHolder[V]:
        """Create a holder for a new view of ``view_type``."""
        return ViewHolder(self.view_binding.create(parent, view_type), view_type)

    def bind_view_holder(self, holder: ViewHolder[V], position: int) -> bool:
        """Write the item at ``position`` into ``holder``.

        Tries ``ViewBinding.bind`` first, then the writer registered for
        the holder's view type. Returns False when neither handled it.

        Raises:
            IndexOutOfRange: If ``position`` is not in ``[0, size)``.

        """
        self._check_position("bind_view_holder", position)
        item = self[position]
        holder.position = position
        if self.view_binding.bind(holder.view, item, position, holder.view_type):
            return True
        writer = self.registry.resolve(holder.view_type)
        if writer is None:
            return False
        writer(holder.view, item, position)
        return True

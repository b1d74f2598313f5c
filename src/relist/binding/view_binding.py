"""View binding contract between an item adapter and a host UI toolkit.

The adapter never builds widgets itself. A host subclasses ``ViewBinding``
to say which view type an item needs, how to create a view for a type,
and how to write an item into a view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Binding[V]:
    """A created view.

    Attributes:
        item_view: The root view handed to the host's list widget.
        view: The object ``bind`` writes into (often the same as
            ``item_view``, or a holder of cached sub-views).

    """

    item_view: Any
    view: V


class ViewBinding[V, M](ABC):
    """Host-supplied view factory and writer for one adapter."""

    def type(self, position: int) -> int:
        """Return the view type of the item at ``position``.

        The default assumes a single view type and returns 0. Type codes
        need not be contiguous.
        """
        return 0

    @abstractmethod
    def create(self, parent: Any, view_type: int) -> Binding[V]:
        """Create a new view able to display items of ``view_type``.

        ``parent`` is whatever container the host passes through; the
        adapter does not inspect it. The returned binding is reused for
        different items of the same type.
        """

    def bind(self, view: V, item: M, position: int, view_type: int) -> bool:
        """Write ``item`` into ``view``.

        Return True when handled. Returning False (the default) lets the
        adapter fall back to the writer registered for ``view_type``.
        """
        return False

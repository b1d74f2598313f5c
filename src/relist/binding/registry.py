"""Per-view-type writers, resolved when registered.

A ``BindRegistry`` maps a view type to the function that writes an item
into a view of that type. The adapter consults it when the primary
``ViewBinding.bind`` declines an item.

Usage::

    registry = BindRegistry()

    @registry.writer(HEADER)
    def bind_header(view, item, position):
        view.title = item.title

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from relist._errors import BindingError

if TYPE_CHECKING:
    from relist._types import ViewType, ViewWriter


class BindRegistry:
    """Mapping of view type to writer function.

    Registration is validated eagerly: a non-callable writer or a second
    writer for the same type raises ``BindingError`` at registration.

    """

    __slots__ = ("_writers",)

    def __init__(self) -> None:
        self._writers: dict[ViewType, ViewWriter] = {}

    def register(self, view_type: ViewType, writer: ViewWriter) -> None:
        """Register ``writer`` for ``view_type``."""
        if not callable(writer):
            msg = f"Writer for view type {view_type} is not callable: {writer!r}"
            raise BindingError(msg)
        if view_type in self._writers:
            msg = f"View type {view_type} already has a writer"
            raise BindingError(msg)
        self._writers[view_type] = writer

    def writer(self, view_type: ViewType) -> Callable[[ViewWriter], ViewWriter]:
        """Decorator form of ``register``."""

        def decorator(func: ViewWriter) -> ViewWriter:
            self.register(view_type, func)
            return func

        return decorator

    def unregister(self, view_type: ViewType) -> None:
        """Forget the writer for ``view_type`` (no-op if none)."""
        self._writers.pop(view_type, None)

    def resolve(self, view_type: ViewType) -> ViewWriter | None:
        """Return the writer for ``view_type``, or None."""
        return self._writers.get(view_type)

    def __contains__(self, view_type: object) -> bool:
        return view_type in self._writers

    def __len__(self) -> int:
        return len(self._writers)

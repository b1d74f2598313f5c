"""Shared type definitions for relist."""

from collections.abc import Callable
from typing import Any, Literal

# Integer tag selecting a rendering template for an item
type ViewType = int

# Equality lookup strategy used by the reconciler
type LookupStrategy = Literal["linear", "hashed"]

# Reconciler phase name
type Phase = Literal["removals", "additions", "moves"]

# Per-view-type write function: (view, item, position) -> None
type ViewWriter = Callable[[Any, Any, int], Any]

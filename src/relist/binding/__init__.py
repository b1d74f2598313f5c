"""Binding layer — the boundary between items and a host's views."""

from relist.binding.adapter import ItemAdapter, ViewHolder
from relist.binding.registry import BindRegistry
from relist.binding.view_binding import Binding, ViewBinding

__all__ = [
    "BindRegistry",
    "Binding",
    "ItemAdapter",
    "ViewBinding",
    "ViewHolder",
]

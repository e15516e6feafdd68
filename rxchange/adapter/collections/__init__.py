"""Change adapters for list, map and set containers."""

from .list_adapter import ListChangeAdapter
from .map_adapter import MapChangeAdapter
from .set_adapter import SetChangeAdapter

__all__ = [
    "ListChangeAdapter",
    "MapChangeAdapter",
    "SetChangeAdapter",
]

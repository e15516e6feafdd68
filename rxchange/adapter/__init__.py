"""
rxchange Adapters
=================

Classes:
- ChangeAdapter: shared lock, subject and publish protocol
- SingleChangeAdapter: one value
- ListChangeAdapter, MapChangeAdapter, SetChangeAdapter: collections
"""

from .base import ChangeAdapter, CollectionChangeAdapter
from .collections import ListChangeAdapter, MapChangeAdapter, SetChangeAdapter
from .single import SingleChangeAdapter

__all__ = [
    "ChangeAdapter",
    "CollectionChangeAdapter",
    "SingleChangeAdapter",
    "ListChangeAdapter",
    "MapChangeAdapter",
    "SetChangeAdapter",
]

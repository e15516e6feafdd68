"""
rxchange - Reactive Change Adapters

Wraps a single value, list, map or set so that every mutation goes through
an adapter. Each successful mutation publishes an immutable ChangeMessage
(before/after snapshots, change type, metadata) on an RxPY observable.

Example:
    from reactivex import operators as ops
    from rxchange import Batch, ChangeType, ChangeTypeFilter, ListChangeAdapter, MetadataFilter

    adapter = ListChangeAdapter()
    adapter.observable.pipe(
        ops.filter(ChangeTypeFilter(ChangeType.ADD) & MetadataFilter(Batch)),
    ).subscribe(lambda message: print(message.metadata.items))

    adapter.add(1)            # filtered out, single element
    adapter.add_all([2, 3])   # prints (2, 3)
"""

import logging

from .adapter import (
    ChangeAdapter,
    ListChangeAdapter,
    MapChangeAdapter,
    SetChangeAdapter,
    SingleChangeAdapter,
)
from .change_type import ChangeType
from .errors import AdapterDisposedError, ChangeAdapterError, LockUpgradeError
from .filter import ChangeTypeFilter, MessageFilter, MetadataFilter
from .message import Batch, ChangeMessage, Entry, Metadata, Single
from .observer import ChangeMessageObserver

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Adapters
    "ChangeAdapter",
    "SingleChangeAdapter",
    "ListChangeAdapter",
    "MapChangeAdapter",
    "SetChangeAdapter",
    # Messages
    "ChangeType",
    "ChangeMessage",
    "Metadata",
    "Single",
    "Batch",
    "Entry",
    # Filters
    "MessageFilter",
    "ChangeTypeFilter",
    "MetadataFilter",
    # Observers
    "ChangeMessageObserver",
    # Exceptions
    "ChangeAdapterError",
    "AdapterDisposedError",
    "LockUpgradeError",
]

"""
List Change Adapter
===================

Ordered sequence with duplicates allowed. Snapshots are tuples; metadata is
``Single(item)`` for one-element operations and ``Batch(tuple(items))`` for
batch operations.

Index rules:
- ``add_at`` accepts ``0..len`` (``len`` appends)
- ``remove_at`` and ``update`` accept ``0..len-1``
- negative indices are rejected
"""

from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from ...change_type import ChangeType
from ...message import Batch, Single
from ..base import CollectionChangeAdapter

D = TypeVar("D")


class ListChangeAdapter(CollectionChangeAdapter[List[D], Tuple[D, ...]], Generic[D]):
    """
    Adapter that implements the reactive change model for lists.

    Usage:
        adapter = ListChangeAdapter()
        adapter.add(1)             # ADD, metadata Single(1)
        adapter.add_all([2, 3])    # ADD, metadata Batch((2, 3))
        adapter.remove_at(0)       # REMOVE, metadata Single(1)
        adapter.update(0, 20)      # UPDATE, metadata Single(20)
        adapter.get_all()          # [20, 3]
    """

    def __init__(
        self, initial: Optional[Iterable[D]] = None, *, name: Optional[str] = None
    ):
        super().__init__(list(initial) if initial is not None else [], name=name)

    def _snapshot(self, data: List[D]) -> Tuple[D, ...]:
        return tuple(data)

    def add(self, item: D) -> bool:
        """Append ``item``. Always succeeds."""
        with self._mutation() as data:
            old = self._snapshot(data)
            data.append(item)
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Single(item))

    def add_at(self, index: int, item: D) -> bool:
        """Insert ``item`` before ``index``; ``index == len`` appends."""
        with self._mutation() as data:
            if not 0 <= index <= len(data):
                return self._reject("add_at", "index %d out of range", index)

            old = self._snapshot(data)
            data.insert(index, item)
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Single(item))

    def add_all(self, items: Iterable[D]) -> bool:
        """Append every element of ``items``. Always succeeds."""
        batch = tuple(items)
        with self._mutation() as data:
            old = self._snapshot(data)
            data.extend(batch)
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Batch(batch))

    def remove(self, item: D) -> bool:
        """Remove the first occurrence of ``item``."""
        with self._mutation() as data:
            if item not in data:
                return self._reject("remove", "item not present")

            old = self._snapshot(data)
            data.remove(item)
            return self._commit(
                old, self._snapshot(data), ChangeType.REMOVE, Single(item)
            )

    def remove_at(self, index: int) -> bool:
        """Remove the element at ``index``; metadata is the removed element."""
        with self._mutation() as data:
            if not 0 <= index < len(data):
                return self._reject("remove_at", "index %d out of range", index)

            old = self._snapshot(data)
            removed = data.pop(index)
            return self._commit(
                old, self._snapshot(data), ChangeType.REMOVE, Single(removed)
            )

    def remove_all(self, items: Iterable[D]) -> bool:
        """
        Remove every occurrence of every element of ``items``.

        Fails without mutating unless all of ``items`` are present.
        """
        batch = tuple(items)
        with self._mutation() as data:
            if not all(item in data for item in batch):
                return self._reject("remove_all", "not every item is present")

            old = self._snapshot(data)
            data[:] = [item for item in data if item not in batch]
            return self._commit(
                old, self._snapshot(data), ChangeType.REMOVE, Batch(batch)
            )

    def update(self, index: int, item: D) -> bool:
        """Replace the element at ``index`` with ``item``."""
        with self._mutation() as data:
            if not 0 <= index < len(data):
                return self._reject("update", "index %d out of range", index)

            old = self._snapshot(data)
            data[index] = item
            return self._commit(
                old, self._snapshot(data), ChangeType.UPDATE, Single(item)
            )

    def get(self, index: int) -> D:
        """Return the element at ``index``. Raises IndexError when out of range."""
        with self._guarded.read() as data:
            return data[index]

    def get_all(self) -> List[D]:
        """Return a copy of the list."""
        with self._guarded.read() as data:
            return list(data)

    def __getitem__(self, index: int) -> D:
        return self.get(index)

"""
Set Change Adapter
==================

Unordered collection of unique elements. Snapshots and batch metadata are
frozensets.

Batch operations are all-or-nothing: ``add_all`` fails if any element is
already a member, ``remove_all`` fails unless every element is a member.
"""

from typing import FrozenSet, Generic, Iterable, Optional, Set, TypeVar

from ...change_type import ChangeType
from ...message import Batch, Single
from ..base import CollectionChangeAdapter

D = TypeVar("D")


class SetChangeAdapter(CollectionChangeAdapter[Set[D], FrozenSet[D]], Generic[D]):
    """
    Adapter that implements the reactive change model for sets.

    Usage:
        adapter = SetChangeAdapter()
        adapter.add_all({0, 1, 2})   # ADD, Batch(frozenset({0, 1, 2}))
        adapter.add(1)               # False, already a member
        adapter.remove(1)            # REMOVE, Single(1)
    """

    def __init__(
        self, initial: Optional[Iterable[D]] = None, *, name: Optional[str] = None
    ):
        super().__init__(set(initial) if initial is not None else set(), name=name)

    def _snapshot(self, data: Set[D]) -> FrozenSet[D]:
        return frozenset(data)

    def add(self, item: D) -> bool:
        """Add ``item``. Fails if it is already a member."""
        with self._mutation() as data:
            if item in data:
                return self._reject("add", "item already a member")

            old = self._snapshot(data)
            data.add(item)
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Single(item))

    def add_all(self, items: Iterable[D]) -> bool:
        """Add every element of ``items``. Fails if any is already a member."""
        batch = frozenset(items)
        with self._mutation() as data:
            if not batch.isdisjoint(data):
                return self._reject("add_all", "some items are already members")

            old = self._snapshot(data)
            data |= batch
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Batch(batch))

    def remove(self, item: D) -> bool:
        """Remove ``item``. Fails if it is not a member."""
        with self._mutation() as data:
            if item not in data:
                return self._reject("remove", "item not a member")

            old = self._snapshot(data)
            data.remove(item)
            return self._commit(
                old, self._snapshot(data), ChangeType.REMOVE, Single(item)
            )

    def remove_all(self, items: Iterable[D]) -> bool:
        """Remove every element of ``items``. Fails unless all are members."""
        batch = frozenset(items)
        with self._mutation() as data:
            if not batch <= data:
                return self._reject("remove_all", "not every item is a member")

            old = self._snapshot(data)
            data -= batch
            return self._commit(
                old, self._snapshot(data), ChangeType.REMOVE, Batch(batch)
            )

    def get_all(self) -> Set[D]:
        """Return a copy of the set."""
        with self._guarded.read() as data:
            return set(data)

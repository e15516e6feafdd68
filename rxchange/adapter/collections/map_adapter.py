"""
Map Change Adapter
==================

Key/value mapping with unique keys. Snapshots are read-only mapping proxies
over private dict copies. Single-entry operations carry ``Single(Entry)``
metadata; batch operations carry ``Batch`` over a read-only mapping.

Batch operations validate every key before touching the map, so a batch is
applied completely or not at all.
"""

from types import MappingProxyType
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, TypeVar

from ...change_type import ChangeType
from ...message import Batch, Entry, Single
from ..base import CollectionChangeAdapter

K = TypeVar("K")
D = TypeVar("D")


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


class MapChangeAdapter(
    CollectionChangeAdapter[Dict[K, D], Mapping[K, D]], Generic[K, D]
):
    """
    Adapter that implements the reactive change model for maps.

    Usage:
        adapter = MapChangeAdapter()
        adapter.add("a", 1)                 # ADD, Single(Entry("a", 1))
        adapter.add("a", 2)                 # False, key exists
        adapter.update_all({"a": 3})        # UPDATE, Batch({"a": 3})
        adapter.remove_all({"a"})           # REMOVE, Batch({"a": 3})
    """

    def __init__(
        self, initial: Optional[Mapping[K, D]] = None, *, name: Optional[str] = None
    ):
        super().__init__(dict(initial) if initial is not None else {}, name=name)

    def _snapshot(self, data: Dict[K, D]) -> Mapping[K, D]:
        return _frozen(data)

    def add(self, key: K, value: D) -> bool:
        """Insert a new entry. Fails if ``key`` is already present."""
        with self._mutation() as data:
            if key in data:
                return self._reject("add", "key %r already present", key)

            old = self._snapshot(data)
            data[key] = value
            return self._commit(
                old, self._snapshot(data), ChangeType.ADD, Single(Entry(key, value))
            )

    def add_all(self, entries: Mapping[K, D]) -> bool:
        """Insert all ``entries``. Fails if any key is already present."""
        batch = _frozen(entries)
        with self._mutation() as data:
            for key in batch:
                if key in data:
                    return self._reject("add_all", "key %r already present", key)

            old = self._snapshot(data)
            data.update(batch)
            return self._commit(old, self._snapshot(data), ChangeType.ADD, Batch(batch))

    def remove(self, key: K) -> bool:
        """Remove the entry for ``key``; metadata is the removed entry."""
        with self._mutation() as data:
            if key not in data:
                return self._reject("remove", "key %r not present", key)

            old = self._snapshot(data)
            value = data.pop(key)
            return self._commit(
                old,
                self._snapshot(data),
                ChangeType.REMOVE,
                Single(Entry(key, value)),
            )

    def remove_all(self, keys: Iterable[K]) -> bool:
        """
        Remove the entries for all ``keys``. Fails unless every key is present.

        The metadata holds the removed entries with their values from before
        the removal.
        """
        batch = list(keys)
        with self._mutation() as data:
            for key in batch:
                if key not in data:
                    return self._reject("remove_all", "key %r not present", key)

            old = self._snapshot(data)
            removed = {key: data.pop(key) for key in batch if key in data}
            return self._commit(
                old,
                self._snapshot(data),
                ChangeType.REMOVE,
                Batch(MappingProxyType(removed)),
            )

    def update(self, key: K, value: D) -> bool:
        """Replace the value of an existing key. Fails if ``key`` is absent."""
        with self._mutation() as data:
            if key not in data:
                return self._reject("update", "key %r not present", key)

            old = self._snapshot(data)
            data[key] = value
            return self._commit(
                old,
                self._snapshot(data),
                ChangeType.UPDATE,
                Single(Entry(key, value)),
            )

    def update_all(self, entries: Mapping[K, D]) -> bool:
        """Replace the values of existing keys. Fails if any key is absent."""
        batch = _frozen(entries)
        with self._mutation() as data:
            for key in batch:
                if key not in data:
                    return self._reject("update_all", "key %r not present", key)

            old = self._snapshot(data)
            data.update(batch)
            return self._commit(
                old, self._snapshot(data), ChangeType.UPDATE, Batch(batch)
            )

    def get(self, key: K, default: Any = None) -> Optional[D]:
        with self._guarded.read() as data:
            return data.get(key, default)

    def get_all(self) -> Dict[K, D]:
        """Return a copy of the map."""
        with self._guarded.read() as data:
            return dict(data)

    def __getitem__(self, key: K) -> D:
        with self._guarded.read() as data:
            return data[key]

"""
Change Messages
===============

A ChangeMessage is the immutable record of one completed mutation: the full
container state before and after, the kind of change, and metadata naming
exactly what changed.

Metadata is a tagged variant rather than a bare value, so observers can tell
a single-element change from a batch change without guessing from the
payload's type:

- ``Single(value)``: one element, or one ``Entry`` for mappings
- ``Batch(items)``: the elements (or mapping of entries) of a batch call
- ``None``: no metadata (scalar updates)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, Iterator, NamedTuple, Optional, TypeVar, Union

from .change_type import ChangeType

D = TypeVar("D")


class Entry(NamedTuple):
    """A single key/value pair of a mapping."""

    key: Any
    value: Any


@dataclass(frozen=True)
class Single:
    """Metadata for an operation that touched exactly one element."""

    value: Any

    def members(self) -> Iterator[Any]:
        yield self.value


@dataclass(frozen=True)
class Batch:
    """
    Metadata for an operation that touched a collection of elements.

    ``items`` is an immutable snapshot of the batch argument: a tuple for
    lists, a frozenset for sets, and a read-only mapping for maps.
    """

    items: Any

    # Map batches hold read-only mappings, which cannot be hashed
    __hash__ = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def members(self) -> Iterator[Any]:
        """Iterate the batch's elements, as ``Entry`` pairs for mappings."""
        if isinstance(self.items, Mapping):
            for key, value in self.items.items():
                yield Entry(key, value)
        else:
            yield from self.items


Metadata = Union[Single, Batch]


@dataclass(frozen=True)
class ChangeMessage(Generic[D]):
    """
    Represents one completed mutation of an adapter's data.

    Attributes:
        old_data: Snapshot of the data before the mutation
        new_data: Snapshot of the data after the mutation
        change_type: Kind of change (ADD, REMOVE, UPDATE)
        metadata: What changed, or None when nothing beyond new_data applies

    Messages compare by value but are not hashable: map snapshots are
    read-only mappings, and every adapter's messages behave the same way.
    """

    old_data: D
    new_data: D
    change_type: ChangeType
    metadata: Optional[Metadata] = None

    __hash__ = None

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    def __repr__(self) -> str:
        return (
            f"ChangeMessage({self.change_type.name} "
            f"{self.old_data!r} -> {self.new_data!r}, metadata={self.metadata!r})"
        )

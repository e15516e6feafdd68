"""
Change Message Filters
======================

Pure predicates over ChangeMessage for use in an observer's filter chain:

    adapter.observable.pipe(
        ops.filter(ChangeTypeFilter(ChangeType.ADD)),
        ops.filter(MetadataFilter(Batch)),
    ).subscribe(on_batch_added)

Predicates also combine directly with ``&``, ``|`` and ``~``.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple, Type, Union

from .change_type import ChangeType
from .message import Batch, ChangeMessage, Single


class MessageFilter(ABC):
    """Base predicate; instances are callable and composable."""

    @abstractmethod
    def test(self, message: ChangeMessage) -> bool:
        pass

    def __call__(self, message: ChangeMessage) -> bool:
        return self.test(message)

    def __and__(self, other: "MessageFilter") -> "MessageFilter":
        return _Combined(all, (self, other))

    def __or__(self, other: "MessageFilter") -> "MessageFilter":
        return _Combined(any, (self, other))

    def __invert__(self) -> "MessageFilter":
        return _Negated(self)


class _Combined(MessageFilter):
    def __init__(
        self,
        reducer: Callable,
        filters: Tuple[MessageFilter, ...],
    ):
        self._reducer = reducer
        self._filters = filters

    def test(self, message: ChangeMessage) -> bool:
        return self._reducer(f.test(message) for f in self._filters)

    def __repr__(self) -> str:
        op = " & " if self._reducer is all else " | "
        return "(" + op.join(repr(f) for f in self._filters) + ")"


class _Negated(MessageFilter):
    def __init__(self, inner: MessageFilter):
        self._inner = inner

    def test(self, message: ChangeMessage) -> bool:
        return not self._inner.test(message)

    def __repr__(self) -> str:
        return f"~{self._inner!r}"


class ChangeTypeFilter(MessageFilter):
    """Passes messages whose change type equals the requested one."""

    def __init__(self, change_type: ChangeType):
        self.change_type = change_type

    def test(self, message: ChangeMessage) -> bool:
        return message.change_type == self.change_type

    def __repr__(self) -> str:
        return f"ChangeTypeFilter({self.change_type.name})"


class MetadataFilter(MessageFilter):
    """
    Passes messages whose metadata has the requested shape.

    Args:
        shape: ``Single`` or ``Batch``
        of_type: Optional type (or tuple of types) the payload must also be
            an instance of. For ``Single`` this is the value itself; for
            ``Batch`` every member must match (``Entry`` pairs for maps).

    Messages without metadata never pass.
    """

    def __init__(
        self,
        shape: Type[Union[Single, Batch]],
        of_type: Optional[Union[type, Tuple[type, ...]]] = None,
    ):
        if shape not in (Single, Batch):
            raise TypeError(f"shape must be Single or Batch, not {shape!r}")

        self.shape = shape
        self.of_type = of_type

    def test(self, message: ChangeMessage) -> bool:
        metadata = message.metadata
        if not isinstance(metadata, self.shape):
            return False

        if self.of_type is None:
            return True

        return all(isinstance(member, self.of_type) for member in metadata.members())

    def __repr__(self) -> str:
        if self.of_type is None:
            return f"MetadataFilter({self.shape.__name__})"
        return f"MetadataFilter({self.shape.__name__}, of_type={self.of_type!r})"

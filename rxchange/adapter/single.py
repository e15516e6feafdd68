"""Change adapter for a single value."""

from typing import Generic, Optional, TypeVar

from ..change_type import ChangeType
from .base import ChangeAdapter

D = TypeVar("D")


class SingleChangeAdapter(ChangeAdapter[D, D], Generic[D]):
    """
    Holds one value and publishes an UPDATE message whenever it is replaced.

    Usage:
        adapter = SingleChangeAdapter(0)
        adapter.observable.subscribe(lambda m: print(m.old_data, m.new_data))
        adapter.update(1)  # prints "0 1"

    The value itself is used as its own snapshot; store immutable values if
    observers must not see later in-place changes.
    """

    def __init__(self, value: Optional[D] = None, *, name: Optional[str] = None):
        super().__init__(value, name=name)

    def _snapshot(self, data: D) -> D:
        return data

    def update(self, value: D) -> bool:
        """Replace the held value. Always succeeds."""
        with self._mutation() as old_value:
            self._guarded.replace(value)
            return self._commit(old_value, value, ChangeType.UPDATE)

    def get(self) -> D:
        with self._guarded.read() as value:
            return value

    def __repr__(self) -> str:
        return f"SingleChangeAdapter(name={self._name!r}, value={self.get()!r})"

"""
Change Adapter Base
===================

A change adapter is the only way to mutate the container it owns. Every
mutating operation follows the same sequence while holding the write lock:

    validate -> snapshot old -> mutate -> snapshot new -> publish

Rejected operations return ``False`` before anything is mutated and publish
nothing. Successful operations publish exactly one ChangeMessage to the
adapter's subject and return ``True``. Because the publish happens under the
write lock, messages reach observers in the same order the mutations were
applied, and readers never see a state that has no message.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, TypeVar

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.subject import Subject

from ..change_type import ChangeType
from ..errors import AdapterDisposedError
from ..message import ChangeMessage, Metadata
from ..util.rwlock import Guarded

C = TypeVar("C")
S = TypeVar("S")

logger = logging.getLogger(__name__)


class _IsolatedObserver(ObserverBase):
    """
    Wraps one subscriber so its exceptions cannot cut off the others.

    A subscriber that raises from ``on_next`` is logged, detached from the
    subject, and its error is handed back to the publishing adapter.
    """

    def __init__(self, adapter: "ChangeAdapter", observer: ObserverBase):
        self._adapter = adapter
        self._observer = observer
        self.subscription: Optional[DisposableBase] = None

    def on_next(self, message: ChangeMessage) -> None:
        try:
            self._observer.on_next(message)
        except Exception as e:
            logger.error(
                "%s: subscriber raised while handling %s; detaching it",
                self._adapter.name,
                message.change_type.name,
                exc_info=True,
            )
            if self.subscription is not None:
                self.subscription.dispose()
            self._adapter._delivery_failed(e)

    def on_error(self, error: Exception) -> None:
        self._observer.on_error(error)

    def on_completed(self) -> None:
        self._observer.on_completed()


class ChangeAdapter(ABC, Generic[C, S]):
    """
    Common machinery for all adapters.

    Type parameters:
        C: the live container type (list, dict, set, ...)
        S: the immutable snapshot type published in messages

    Subclasses implement ``_snapshot`` and their mutating operations on top
    of ``_mutation()``, ``_commit()`` and ``_reject()``.
    """

    def __init__(self, container: C, name: Optional[str] = None) -> None:
        self._name = name or f"{type(self).__name__}@{id(self):x}"
        self._guarded: Guarded[C] = Guarded(container)
        self._subject: Subject = Subject()
        self._observable: Observable = reactivex.create(self._subscribe)
        self._disposed = False
        self._delivery_errors: Optional[List[Exception]] = None

    # ------------------------------------------------------------------
    # Event channel
    # ------------------------------------------------------------------

    def _subscribe(
        self,
        observer: ObserverBase,
        scheduler: Optional[SchedulerBase] = None,
    ) -> DisposableBase:
        isolated = _IsolatedObserver(self, observer)
        isolated.subscription = self._subject.subscribe(isolated, scheduler=scheduler)
        return isolated.subscription

    def _delivery_failed(self, error: Exception) -> None:
        if self._delivery_errors is None:
            raise error
        self._delivery_errors.append(error)

    @property
    def observable(self) -> Observable:
        """
        Observable of this adapter's change messages.

        Subscribers only receive messages published after they subscribe.
        """
        return self._observable

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Mutation protocol
    # ------------------------------------------------------------------

    @abstractmethod
    def _snapshot(self, data: C) -> S:
        """Return an immutable copy of ``data``."""
        pass

    @contextmanager
    def _mutation(self) -> Iterator[C]:
        with self._guarded.write() as data:
            if self._disposed:
                raise AdapterDisposedError(f"{self._name} has been disposed")
            yield data

    def _commit(
        self,
        old_data: S,
        new_data: S,
        change_type: ChangeType,
        metadata: Optional[Metadata] = None,
    ) -> bool:
        """
        Publish the message for a completed mutation. Call under the write lock.

        Every subscriber receives the message even if an earlier one raises.
        Failing subscribers are detached, and the first of their errors is
        raised to the caller once delivery has finished.
        """
        message = ChangeMessage(old_data, new_data, change_type, metadata)
        logger.debug("%s: publishing %s", self._name, change_type.name)

        # Nested publishes from inside a subscriber collect their own errors
        errors: List[Exception] = []
        outer, self._delivery_errors = self._delivery_errors, errors
        try:
            self._subject.on_next(message)
        finally:
            self._delivery_errors = outer

        if errors:
            raise errors[0]
        return True

    def _reject(self, operation: str, reason: str, *args: Any) -> bool:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: rejected %s (%s)", self._name, operation, reason % args
            )
        return False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """
        Complete the event channel and refuse further mutations.

        Current subscribers receive ``on_completed``; later subscribers are
        completed immediately. Reads keep working. Calling twice is a no-op.
        """
        with self._guarded.write():
            if self._disposed:
                return
            self._disposed = True
            logger.debug("%s: disposed", self._name)
            self._subject.on_completed()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()


class CollectionChangeAdapter(ChangeAdapter[C, S]):
    """Adapter over a sized, iterable container."""

    def __len__(self) -> int:
        with self._guarded.read() as data:
            return len(data)

    def __contains__(self, item: Any) -> bool:
        with self._guarded.read() as data:
            return item in data

    def __repr__(self) -> str:
        with self._guarded.read() as data:
            return f"{type(self).__name__}(name={self._name!r}, size={len(data)})"

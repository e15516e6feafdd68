"""
Reader/Writer Locking
=====================

ReadWriteLock lets any number of threads read at once while writers get
exclusive access. Guarded pairs one container with one lock so that every
access to the container goes through a scoped acquisition.

Adapters publish change messages while still holding the write lock, and
observers run synchronously inside that publish. The lock is therefore
reentrant for the writing thread: it may take the write lock again, or the
read lock, without deadlocking on itself.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterator, Optional, TypeVar

from ..errors import LockUpgradeError

C = TypeVar("C")


class ReadWriteLock:
    """
    Multiple readers XOR one writer, with writer preference.

    A writer that is waiting blocks new readers, so a steady stream of reads
    cannot starve mutations. Threads that already hold the lock are always
    let through again.

    Usage:
        lock = ReadWriteLock()

        with lock.read_locked():
            ...  # shared access

        with lock.write_locked():
            ...  # exclusive access
    """

    __slots__ = ("_cond", "_readers", "_writer", "_write_depth", "_waiting_writers")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())

        # Thread ident -> read depth
        self._readers: Dict[int, int] = {}

        # Owning writer thread and its reentrancy depth
        self._writer: Optional[int] = None
        self._write_depth = 0

        self._waiting_writers = 0

    def acquire_read(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me or me in self._readers:
                self._readers[me] = self._readers.get(me, 0) + 1
                return

            while self._writer is not None or self._waiting_writers:
                self._cond.wait()

            self._readers[me] = 1

    def release_read(self) -> None:
        me = threading.get_ident()
        with self._cond:
            depth = self._readers.get(me, 0)
            if depth == 0:
                raise RuntimeError("Cannot release a read lock that is not held")

            if depth == 1:
                del self._readers[me]
            else:
                self._readers[me] = depth - 1

            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                self._write_depth += 1
                return

            if me in self._readers:
                raise LockUpgradeError(
                    "Cannot acquire the write lock while holding the read lock"
                )

            self._waiting_writers += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1

            self._writer = me
            self._write_depth = 1

    def release_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer != me:
                raise RuntimeError("Cannot release a write lock that is not held")

            self._write_depth -= 1
            if self._write_depth == 0:
                self._writer = None
                self._cond.notify_all()

    def is_write_locked_by_current_thread(self) -> bool:
        with self._cond:
            return self._writer == threading.get_ident()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class Guarded(Generic[C]):
    """
    A container that can only be reached through its lock.

    ``read()`` and ``write()`` hand out the live container for the duration
    of a ``with`` block and release the lock on every exit path, including
    early returns and exceptions. Callers must not keep the reference after
    the block ends.

    Usage:
        guarded = Guarded([])

        with guarded.write() as data:
            data.append(1)

        with guarded.read() as data:
            snapshot = tuple(data)
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: C) -> None:
        self._value = value
        self._lock = ReadWriteLock()

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    @contextmanager
    def read(self) -> Iterator[C]:
        with self._lock.read_locked():
            yield self._value

    @contextmanager
    def write(self) -> Iterator[C]:
        with self._lock.write_locked():
            yield self._value

    def replace(self, value: C) -> C:
        """
        Swap the guarded value for a new one and return the previous value.

        Only valid inside a ``write()`` block of the calling thread; used by
        holders of immutable values that cannot be mutated in place.
        """
        if not self._lock.is_write_locked_by_current_thread():
            raise RuntimeError("replace() requires the write lock")

        old, self._value = self._value, value
        return old

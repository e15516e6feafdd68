"""
Exceptions raised by change adapters.

Rejected mutations (duplicate keys, missing elements, bad indices) are not
errors: they return ``False``. The classes below signal misuse.
"""


class ChangeAdapterError(Exception):
    """Base class for rxchange errors."""

    pass


class AdapterDisposedError(ChangeAdapterError):
    """Raised when a disposed adapter is asked to mutate its data."""

    pass


class LockUpgradeError(ChangeAdapterError, RuntimeError):
    """Raised when a thread holding a read lock asks for the write lock."""

    pass

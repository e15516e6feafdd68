"""
rxchange Utils - Concurrency Primitives
=======================================

Classes:
- ReadWriteLock: reentrant reader/writer lock with writer preference
- Guarded: a container reachable only through scoped read/write acquisition
"""

from .rwlock import Guarded, ReadWriteLock

__all__ = [
    "ReadWriteLock",
    "Guarded",
]

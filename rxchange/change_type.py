"""Kinds of mutation reported by change messages."""

from enum import Enum


class ChangeType(Enum):
    """Types of changes that can occur in an adapter."""

    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"

"""
Observer base class for change messages.

Subclass ChangeMessageObserver and override only the callbacks you need;
everything else is a no-op.

    class Logger(ChangeMessageObserver):
        def on_add(self, message):
            print("added", message.metadata)

    adapter.observable.subscribe(Logger())
"""

from reactivex.abc import ObserverBase

from .change_type import ChangeType
from .message import ChangeMessage


class ChangeMessageObserver(ObserverBase):
    """Observer with stub callbacks and per-change-type dispatch."""

    def on_next(self, message: ChangeMessage) -> None:
        if message.change_type is ChangeType.ADD:
            self.on_add(message)
        elif message.change_type is ChangeType.REMOVE:
            self.on_remove(message)
        elif message.change_type is ChangeType.UPDATE:
            self.on_update(message)

    def on_add(self, message: ChangeMessage) -> None:
        pass

    def on_remove(self, message: ChangeMessage) -> None:
        pass

    def on_update(self, message: ChangeMessage) -> None:
        pass

    def on_error(self, error: Exception) -> None:
        pass

    def on_completed(self) -> None:
        pass

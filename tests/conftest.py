"""
Shared pytest fixtures and configuration for rxchange tests.
"""

import pytest

from rxchange import ChangeMessageObserver


class MessageRecorder(ChangeMessageObserver):
    """Observer that keeps every message it receives."""

    def __init__(self):
        self.messages = []
        self.completed = False

    def on_next(self, message):
        self.messages.append(message)

    def on_completed(self):
        self.completed = True

    @property
    def last(self):
        return self.messages[-1]


@pytest.fixture
def record():
    """Subscribe a fresh MessageRecorder to an adapter's observable."""

    def subscribe(adapter):
        recorder = MessageRecorder()
        adapter.observable.subscribe(recorder)
        return recorder

    return subscribe

"""Tests for the ChangeMessageObserver base class."""

from rxchange import ChangeMessageObserver, ListChangeAdapter, SingleChangeAdapter


class DispatchRecorder(ChangeMessageObserver):
    def __init__(self):
        self.calls = []

    def on_add(self, message):
        self.calls.append(("add", message.metadata.value))

    def on_remove(self, message):
        self.calls.append(("remove", message.metadata.value))

    def on_update(self, message):
        self.calls.append(("update", message.metadata.value))

    def on_completed(self):
        self.calls.append(("completed", None))


def test_observer_dispatches_by_change_type():
    """on_next routes each message to the hook for its change type."""
    adapter = ListChangeAdapter()
    observer = DispatchRecorder()
    adapter.observable.subscribe(observer)

    adapter.add("a")
    adapter.update(0, "b")
    adapter.remove("b")

    assert observer.calls == [("add", "a"), ("update", "b"), ("remove", "b")]


def test_observer_receives_completion_on_dispose():
    adapter = ListChangeAdapter()
    observer = DispatchRecorder()
    adapter.observable.subscribe(observer)

    adapter.dispose()

    assert observer.calls == [("completed", None)]


def test_base_observer_callbacks_are_no_ops():
    """The base class can be subscribed as-is without overriding anything."""
    adapter = SingleChangeAdapter(0)
    adapter.observable.subscribe(ChangeMessageObserver())

    assert adapter.update(1)
    adapter.dispose()


def test_partial_override_only_sees_its_events():
    class AddsOnly(ChangeMessageObserver):
        def __init__(self):
            self.added = []

        def on_add(self, message):
            self.added.append(message.metadata.value)

    adapter = ListChangeAdapter()
    observer = AddsOnly()
    adapter.observable.subscribe(observer)

    adapter.add(1)
    adapter.remove(1)
    adapter.add(2)

    assert observer.added == [1, 2]

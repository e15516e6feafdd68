"""Tests for change message filters."""

from types import MappingProxyType

import pytest
from reactivex import operators as ops

from rxchange import (
    Batch,
    ChangeMessage,
    ChangeType,
    ChangeTypeFilter,
    Entry,
    ListChangeAdapter,
    MapChangeAdapter,
    MetadataFilter,
    Single,
)


def _message(change_type=ChangeType.ADD, metadata=None):
    return ChangeMessage((), (), change_type, metadata)


class TestChangeTypeFilter:
    """ChangeTypeFilter passes only messages of one change type."""

    @pytest.mark.parametrize("change_type", list(ChangeType))
    def test_matches_only_its_type(self, change_type):
        change_filter = ChangeTypeFilter(change_type)

        for other in ChangeType:
            assert change_filter(_message(other)) == (other is change_type)

    def test_test_method_matches_call(self):
        change_filter = ChangeTypeFilter(ChangeType.REMOVE)
        message = _message(ChangeType.REMOVE)

        assert change_filter.test(message) is change_filter(message)

    def test_filters_adapter_messages(self):
        """Only REMOVE messages reach a subscriber behind a REMOVE filter."""
        adapter = ListChangeAdapter()
        received = []
        adapter.observable.pipe(
            ops.filter(ChangeTypeFilter(ChangeType.REMOVE))
        ).subscribe(received.append)

        adapter.add(1)
        adapter.add(2)
        adapter.remove(1)
        adapter.update(0, 3)

        assert len(received) == 1
        assert received[0].change_type is ChangeType.REMOVE
        assert received[0].metadata == Single(1)


class TestMetadataFilter:
    """MetadataFilter passes messages by metadata shape."""

    def test_single_shape(self):
        single_filter = MetadataFilter(Single)

        assert single_filter(_message(metadata=Single(5)))
        assert not single_filter(_message(metadata=Batch((6, 7))))

    def test_batch_shape(self):
        batch_filter = MetadataFilter(Batch)

        assert batch_filter(_message(metadata=Batch((6, 7))))
        assert not batch_filter(_message(metadata=Single(5)))

    def test_rejects_messages_without_metadata(self):
        assert not MetadataFilter(Single)(_message())
        assert not MetadataFilter(Batch)(_message())

    def test_rejects_unknown_shape(self):
        with pytest.raises(TypeError):
            MetadataFilter(int)

    def test_of_type_checks_single_value(self):
        int_filter = MetadataFilter(Single, of_type=int)

        assert int_filter(_message(metadata=Single(5)))
        assert not int_filter(_message(metadata=Single("5")))

    def test_of_type_checks_every_batch_member(self):
        int_filter = MetadataFilter(Batch, of_type=int)

        assert int_filter(_message(metadata=Batch((1, 2))))
        assert not int_filter(_message(metadata=Batch((1, "2"))))

    def test_of_type_sees_entries_for_mappings(self):
        entry_filter = MetadataFilter(Batch, of_type=Entry)
        metadata = Batch(MappingProxyType({0: "0"}))

        assert entry_filter(_message(metadata=metadata))
        assert MetadataFilter(Single, of_type=Entry)(
            _message(metadata=Single(Entry(0, "0")))
        )

    def test_distinguishes_single_add_from_batch_add(self):
        """A batch filter drops add() and keeps add_all() on the same channel."""
        adapter = ListChangeAdapter()
        received = []
        adapter.observable.pipe(ops.filter(MetadataFilter(Batch))).subscribe(
            received.append
        )

        adapter.add(5)
        adapter.add_all([6, 7])

        assert len(received) == 1
        assert received[0].metadata == Batch((6, 7))


class TestFilterComposition:
    """Filters combine with &, | and ~."""

    def test_and(self):
        batch_adds = ChangeTypeFilter(ChangeType.ADD) & MetadataFilter(Batch)

        assert batch_adds(_message(ChangeType.ADD, Batch((1,))))
        assert not batch_adds(_message(ChangeType.ADD, Single(1)))
        assert not batch_adds(_message(ChangeType.REMOVE, Batch((1,))))

    def test_or(self):
        add_or_remove = ChangeTypeFilter(ChangeType.ADD) | ChangeTypeFilter(
            ChangeType.REMOVE
        )

        assert add_or_remove(_message(ChangeType.ADD))
        assert add_or_remove(_message(ChangeType.REMOVE))
        assert not add_or_remove(_message(ChangeType.UPDATE))

    def test_invert(self):
        not_update = ~ChangeTypeFilter(ChangeType.UPDATE)

        assert not_update(_message(ChangeType.ADD))
        assert not not_update(_message(ChangeType.UPDATE))

    def test_chained_operators_match_composed_filter(self):
        """Chaining two ops.filter steps is the same as combining with &."""
        adapter = MapChangeAdapter()
        chained, combined = [], []
        add_filter = ChangeTypeFilter(ChangeType.ADD)
        single_filter = MetadataFilter(Single)

        adapter.observable.pipe(
            ops.filter(add_filter), ops.filter(single_filter)
        ).subscribe(chained.append)
        adapter.observable.pipe(ops.filter(add_filter & single_filter)).subscribe(
            combined.append
        )

        adapter.add(0, "0")
        adapter.add_all({1: "1", 2: "2"})
        adapter.update(0, "x")

        assert chained == combined
        assert [m.metadata for m in chained] == [Single(Entry(0, "0"))]

    def test_repr(self):
        combined = ChangeTypeFilter(ChangeType.ADD) & ~MetadataFilter(Single)

        assert repr(combined) == "(ChangeTypeFilter(ADD) & ~MetadataFilter(Single))"

"""
Unit tests for the SQLAlchemy and in-memory data sources.
"""

import pytest
from sqlalchemy.orm import Query

from paginator.repositories import SequenceSource, SQLAlchemyQuerySource, as_data_source
from tests.utils.seed import Record


class TestSQLAlchemyQuerySource:
    """Test the SQLAlchemy query source against SQLite."""

    def test_count(self, record_query):
        """Test counting all seeded rows."""
        assert SQLAlchemyQuerySource(record_query).count() == 5

    def test_for_model(self, db_session, seeded_records):
        """Test building a source straight from a model class."""
        source = SQLAlchemyQuerySource.for_model(db_session, Record)
        assert source.count() == 5

    def test_fetch_slice(self, record_query):
        """Test fetching a slice by offset and limit."""
        rows = SQLAlchemyQuerySource(record_query).fetch(offset=1, limit=2)

        assert [r.value for r in rows] == ["Value [2]", "Value [3]"]

    def test_fetch_past_end(self, record_query):
        """Test that fetching past the end gives no rows."""
        assert SQLAlchemyQuerySource(record_query).fetch(offset=10, limit=5) == []

    def test_apply_filter_returns_new_source(self, record_query):
        """Test that filtering leaves the original source unchanged."""
        source = SQLAlchemyQuerySource(record_query)

        filtered = source.apply_filter(lambda q: q.filter(Record.value != "Value [1]"))

        assert filtered is not source
        assert filtered.count() == 4
        assert source.count() == 5

    def test_apply_filters_in_order(self, record_query):
        """Test that filters apply left to right."""
        source = SQLAlchemyQuerySource(record_query).apply_filters([
            lambda q: q.filter(Record.id > 2),
            lambda q: q.order_by(None).order_by(Record.id.desc()),
        ])

        assert [r.value for r in source.fetch(0, 10)] == ["Value [5]", "Value [4]", "Value [3]"]

    def test_count_ignores_ordering(self, record_query):
        """Test that ordering does not affect the count."""
        source = SQLAlchemyQuerySource(record_query.order_by(Record.value.desc()))
        assert source.count() == 5

    def test_count_after_limit_filter(self, record_query):
        """Test counting a query a filter has already limited."""
        source = SQLAlchemyQuerySource(record_query).apply_filter(lambda q: q.limit(3))

        assert source.is_sliced()
        assert source.count() == 3

    def test_count_after_offset_filter(self, record_query):
        """Test counting a query a filter has already offset."""
        source = SQLAlchemyQuerySource(record_query).apply_filter(lambda q: q.offset(1))

        assert source.count() == 4

    def test_fetch_within_limit_filter(self, record_query):
        """Test that a page never reaches past the limit set by a filter."""
        source = SQLAlchemyQuerySource(record_query).apply_filter(lambda q: q.limit(3))

        assert [r.value for r in source.fetch(offset=2, limit=2)] == ["Value [3]"]

    def test_unsliced_query(self, record_query):
        """Test that a plain query is not reported as sliced."""
        assert not SQLAlchemyQuerySource(record_query).is_sliced()

    def test_filter_must_return_query(self, record_query):
        """Test that a filter returning something else than a Query is rejected."""
        with pytest.raises(TypeError):
            SQLAlchemyQuerySource(record_query).apply_filter(lambda q: q.all())


class TestSequenceSource:
    """Test the in-memory sequence source."""

    def test_count_and_fetch(self):
        """Test counting and slicing a list."""
        source = SequenceSource(range(10))

        assert source.count() == 10
        assert source.fetch(8, 5) == [8, 9]

    def test_apply_filter(self):
        """Test that filtering returns a new source."""
        source = SequenceSource([3, 1, 2])

        filtered = source.apply_filter(sorted)

        assert filtered.items == [1, 2, 3]
        assert source.items == [3, 1, 2]


class TestAsDataSource:
    """Test data source detection."""

    def test_data_source_passes_through(self):
        """Test that a data source is returned unchanged."""
        source = SequenceSource([])
        assert as_data_source(source) is source

    def test_query_is_wrapped(self, record_query):
        """Test that a query is wrapped in a query source."""
        assert isinstance(record_query, Query)
        assert isinstance(as_data_source(record_query), SQLAlchemyQuerySource)

    @pytest.mark.parametrize("handle", ["text", 1, None, [1, 2], len])
    def test_other_values(self, handle):
        """Test that other values are not data sources."""
        assert as_data_source(handle) is None

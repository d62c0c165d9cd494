"""
Data sources the paginator can count and slice.
"""

from typing import Any, Optional

from sqlalchemy.orm import Query

from paginator.errors import InvalidConfigurationError, describe_argument
from paginator.repositories.base_source import DataSource, FilterTransformation
from paginator.repositories.sequence_source import SequenceSource
from paginator.repositories.sqlalchemy_source import SQLAlchemyQuerySource


def as_data_source(handle: Any) -> Optional[DataSource]:
    """
    Return ``handle`` as a DataSource, or None if it is not a data source.

    DataSource instances are returned unchanged and raw SQLAlchemy queries are
    wrapped in a SQLAlchemyQuerySource.
    """
    if isinstance(handle, DataSource):
        return handle
    if isinstance(handle, Query):
        return SQLAlchemyQuerySource(handle)
    return None


def require_data_source(handle: Any) -> DataSource:
    """Like as_data_source, but raise InvalidConfigurationError for non-sources."""
    source = as_data_source(handle)
    if source is None:
        raise InvalidConfigurationError(
            f"Cannot use {describe_argument(handle)} as a data source", argument=handle
        )
    return source


__all__ = [
    'DataSource',
    'FilterTransformation',
    'SequenceSource',
    'SQLAlchemyQuerySource',
    'as_data_source',
    'require_data_source',
]

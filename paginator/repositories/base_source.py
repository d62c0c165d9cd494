"""
Base data source interface for paginated reads.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar('T')

# A filter transformation receives the underlying query handle and returns a
# new one. Transformations compose: each one sees the result of the last.
FilterTransformation = Callable[[Any], Any]


class DataSource(ABC, Generic[T]):
    """
    A queryable store that can be counted, narrowed and sliced.

    Sources are immutable. ``apply_filter`` returns a new source wrapping the
    transformed query and leaves the original untouched.
    """

    @abstractmethod
    def count(self) -> int:
        """Count records matching the current query, ignoring any slice."""

    @abstractmethod
    def apply_filter(self, transformation: FilterTransformation) -> "DataSource[T]":
        """Return a new source with ``transformation`` applied to the query."""

    @abstractmethod
    def fetch(self, offset: int, limit: int) -> List[T]:
        """Fetch at most ``limit`` records starting at zero-based ``offset``."""

    def apply_filters(self, transformations) -> "DataSource[T]":
        """Apply transformations left to right."""
        source = self
        for transformation in transformations:
            source = source.apply_filter(transformation)
        return source

"""
Data source backed by an in-memory sequence.
"""

from typing import List, Sequence

from paginator.repositories.base_source import DataSource, FilterTransformation, T


class SequenceSource(DataSource[T]):
    """Paginates a list of already loaded items.

    Filter transformations receive a list and return a list, e.g.
    ``lambda items: [i for i in items if i["active"]]`` or
    ``lambda items: sorted(items, key=...)``.
    """

    def __init__(self, items: Sequence[T]):
        self.items = list(items)

    def count(self) -> int:
        return len(self.items)

    def apply_filter(self, transformation: FilterTransformation) -> "SequenceSource[T]":
        return SequenceSource(transformation(list(self.items)))

    def fetch(self, offset: int, limit: int) -> List[T]:
        start_idx = offset
        end_idx = start_idx + limit

        return self.items[start_idx:end_idx]

"""
Data source backed by a SQLAlchemy ORM query.
"""

from typing import List, Optional
import logging

from sqlalchemy.orm import Query, Session

from paginator.repositories.base_source import DataSource, FilterTransformation, T

logger = logging.getLogger(__name__)


class SQLAlchemyQuerySource(DataSource[T]):
    """Paginates a ``sqlalchemy.orm.Query``.

    Filter transformations receive the ``Query`` and must return a ``Query``,
    e.g. ``lambda q: q.filter(Record.value == "x")`` or
    ``lambda q: q.order_by(Record.value.desc())``.
    """

    def __init__(self, query: Query):
        self.query = query

    @classmethod
    def for_model(cls, session: Session, model_class: type) -> "SQLAlchemyQuerySource":
        """Build a source over every row of ``model_class``."""
        return cls(session.query(model_class))

    def is_sliced(self) -> bool:
        """True when a filter has already applied LIMIT or OFFSET."""
        return self.query._limit_clause is not None or self.query._offset_clause is not None

    def count(self) -> int:
        query = self.query
        # Ordering has no effect on the count and only slows it down,
        # but it cannot be cleared once the query is sliced
        if not self.is_sliced():
            query = query.order_by(None)
        total = query.count()
        logger.debug(f"Counted {total} rows")
        return total

    def apply_filter(self, transformation: FilterTransformation) -> "SQLAlchemyQuerySource[T]":
        query = transformation(self.query)
        if not isinstance(query, Query):
            raise TypeError(
                f"Filter {transformation!r} returned {type(query).__name__}, expected Query"
            )
        return SQLAlchemyQuerySource(query)

    def fetch(self, offset: int, limit: Optional[int]) -> List[T]:
        if self.is_sliced():
            # Slicing again would replace the filter's own LIMIT/OFFSET,
            # so cut the page out of the already bounded rows instead
            rows = self.query.all()
            rows = rows[offset:offset + limit] if limit else rows[offset:]
            logger.debug(f"Fetched {len(rows)} rows from sliced query (offset={offset}, limit={limit})")
            return rows

        query = self.query
        if offset > 0:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        rows = query.all()
        logger.debug(f"Fetched {len(rows)} rows (offset={offset}, limit={limit})")
        return rows

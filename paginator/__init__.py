"""
Paginate SQLAlchemy queries and in-memory sequences.
"""

from paginator.defaults import (
    PaginationDefaults,
    get_defaults,
    reset_defaults,
    set_default_config,
    set_default_source,
)
from paginator.errors import (
    InvalidConfigurationError,
    NoDataSourceError,
    PageOutOfBoundsError,
    PaginationError,
)
from paginator.models.pagination import PageBoundaries, PaginationConfig, PaginationResult
from paginator.repositories import DataSource, SequenceSource, SQLAlchemyQuerySource
from paginator.services.boundary_service import BoundaryService, calculate_boundaries
from paginator.services.paginator_service import PaginatorService, paginate, paginate_or_raise
from paginator.services.request_resolver import PaginationRequest, resolve_arguments

__all__ = [
    'PaginationDefaults',
    'get_defaults',
    'reset_defaults',
    'set_default_config',
    'set_default_source',
    'InvalidConfigurationError',
    'NoDataSourceError',
    'PageOutOfBoundsError',
    'PaginationError',
    'PageBoundaries',
    'PaginationConfig',
    'PaginationResult',
    'DataSource',
    'SequenceSource',
    'SQLAlchemyQuerySource',
    'BoundaryService',
    'calculate_boundaries',
    'PaginatorService',
    'paginate',
    'paginate_or_raise',
    'PaginationRequest',
    'resolve_arguments',
]

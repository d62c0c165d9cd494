"""
Service that runs a pagination request against its data source.

Flow for one request:
    resolve request -> apply filters -> count -> calculate boundaries -> fetch

A successful request makes exactly two round trips to the data source (one
count, one fetch). A request that fails before counting makes none, and a
page past the end stops after the count.
"""

from typing import Any, Optional
import logging

from paginator.defaults import PaginationDefaults
from paginator.errors import PaginationError
from paginator.models.pagination import PaginationResult
from paginator.services.boundary_service import BoundaryService
from paginator.services.request_resolver import PaginationRequest, ResolvedRequest, resolve_arguments

logger = logging.getLogger(__name__)


class PaginatorService:
    """Service for producing one page of records with its metadata."""

    def __init__(
        self,
        defaults: Optional[PaginationDefaults] = None,
        boundary_service: Optional[BoundaryService] = None,
    ):
        """
        Initialize with optional dependencies.

        Args:
            defaults: Defaults snapshot; the process-wide defaults are read on
                every call when omitted
            boundary_service: Boundary calculator to use
        """
        self.defaults = defaults
        self.boundary_service = boundary_service or BoundaryService()

    def paginate_request(self, request: PaginationRequest) -> PaginationResult:
        """
        Resolve and execute a request.

        Raises:
            NoDataSourceError: no data source could be resolved
            PageOutOfBoundsError: the requested page is past the last page
        """
        return self.execute(request.resolve(self.defaults))

    def execute(self, resolved: ResolvedRequest) -> PaginationResult:
        """Run an already resolved request against its data source."""
        config = resolved.config
        source = resolved.source.apply_filters(resolved.filters)

        total = source.count()
        boundaries = self.boundary_service.calculate(
            config.page, config.per_page, total, config.path
        )

        items = source.fetch(boundaries.offset, config.per_page)
        logger.debug(
            f"Page {boundaries.page}/{boundaries.last_page}: "
            f"{len(items)} of {total} records"
        )

        return PaginationResult.from_boundaries(boundaries, config.path, items)


def paginate_or_raise(
    *arguments: Any,
    defaults: Optional[PaginationDefaults] = None,
    strict: bool = False,
) -> PaginationResult:
    """
    Paginate using a loosely typed argument list.

    Arguments may be a data source (or SQLAlchemy Query), a PaginationConfig
    and any number of filter transformations, in any order.

    Raises:
        NoDataSourceError: no data source passed and no default set
        PageOutOfBoundsError: the requested page is past the last page
        InvalidConfigurationError: an argument was not recognized and
            ``strict`` is set
    """
    request = resolve_arguments(*arguments, strict=strict)
    return PaginatorService(defaults).paginate_request(request)


def paginate(*arguments: Any, defaults: Optional[PaginationDefaults] = None) -> Optional[PaginationResult]:
    """
    Paginate using a loosely typed argument list, returning None on failure.

    Unrecognized arguments are ignored. Use ``paginate_or_raise`` to find out
    why no result was produced.
    """
    try:
        return paginate_or_raise(*arguments, defaults=defaults)
    except PaginationError as e:
        logger.warning(f"No pagination result: {e.message}")
        return None

"""
Service for calculating page boundaries.

Pure functions from (page, per_page, total) to every derived pagination
field. No I/O happens here; the paginator service feeds in the total it got
from the data source.
"""

from typing import Dict, Optional, Tuple

from paginator.config import PAGE_PARAM, PER_PAGE_PARAM
from paginator.errors import InvalidConfigurationError, PageOutOfBoundsError
from paginator.models.pagination import PageBoundaries


class BoundaryService:
    """Service for page boundary calculations and link building."""

    def calculate_last_page(self, total: int, per_page: int) -> int:
        """
        Calculate the highest valid page using ceiling division.

        Returns 0 when there are no records.
        """
        return 0 if total == 0 else (total + per_page - 1) // per_page

    def check_in_bounds(self, page: int, last_page: int) -> None:
        """
        Raise PageOutOfBoundsError if ``page`` lies past ``last_page``.

        An empty result set (last_page == 0) is always in bounds.
        """
        if last_page > 0 and page > last_page:
            raise PageOutOfBoundsError(page, last_page)

    def calculate_neighbours(self, page: int, last_page: int) -> Tuple[int, int]:
        """
        Calculate next and previous page indices.

        Next wraps around to 1 after the last page, previous wraps around to
        the last page before page 1.

        Returns:
            Tuple of (next_page, previous_page)
        """
        if last_page == 0:
            return 1, 1

        next_page = page + 1
        previous_page = page - 1

        if next_page > last_page:
            next_page = 1

        if previous_page < 1:
            previous_page = last_page

        return next_page, previous_page

    def calculate_range(self, page: int, per_page: int, total: int, last_page: int) -> Tuple[int, int]:
        """
        Calculate 1-based indices of the first and last record on the page.

        On the last page ``to`` is clamped to ``total``. An empty result set
        yields (0, 0).

        Returns:
            Tuple of (from_index, to_index)
        """
        if total == 0:
            return 0, 0

        from_index = 1 + (page - 1) * per_page
        to_index = page * per_page

        if page == last_page:
            to_index = total

        return from_index, to_index

    def build_page_url(self, path: str, page: int, per_page: int) -> str:
        """Build the link to a single page."""
        return f"{path}?{PAGE_PARAM}={page}&{PER_PAGE_PARAM}={per_page}"

    def build_page_urls(self, path: str, page: int, per_page: int, last_page: int) -> Dict[str, Optional[str]]:
        """
        Build first, last, next and previous page links.

        A link is None whenever it would point at the current page or outside
        ``1..last_page``.
        """
        urls = {
            "first_page_url": None,
            "last_page_url": None,
            "next_page_url": None,
            "previous_page_url": None,
        }

        if last_page == 0:
            return urls

        if page != 1:
            urls["first_page_url"] = self.build_page_url(path, 1, per_page)

        if page != last_page:
            urls["last_page_url"] = self.build_page_url(path, last_page, per_page)

        if page + 1 <= last_page:
            urls["next_page_url"] = self.build_page_url(path, page + 1, per_page)

        if page - 1 > 0:
            urls["previous_page_url"] = self.build_page_url(path, page - 1, per_page)

        return urls

    def calculate(self, page: int, per_page: int, total: int, path: str = "") -> PageBoundaries:
        """
        Derive every pagination field for a page.

        Args:
            page: Requested page (1-indexed)
            per_page: Items per page
            total: Total number of matching records
            path: Base path for page links

        Returns:
            PageBoundaries for the page

        Raises:
            InvalidConfigurationError: page or per_page below 1, or negative total
            PageOutOfBoundsError: page is past the last page
        """
        if page < 1 or per_page < 1:
            raise InvalidConfigurationError(
                f"page and per_page must be at least 1, got page={page}, per_page={per_page}"
            )
        if total < 0:
            raise InvalidConfigurationError(f"total must not be negative, got {total}", argument=total)

        last_page = self.calculate_last_page(total, per_page)
        self.check_in_bounds(page, last_page)

        next_page, previous_page = self.calculate_neighbours(page, last_page)
        from_index, to_index = self.calculate_range(page, per_page, total, last_page)

        return PageBoundaries(
            page=page,
            per_page=per_page,
            total=total,
            last_page=last_page,
            next_page=next_page,
            previous_page=previous_page,
            from_index=from_index,
            to_index=to_index,
            **self.build_page_urls(path, page, per_page, last_page),
        )


def calculate_boundaries(page: int, per_page: int, total: int, path: str = "") -> PageBoundaries:
    """Shortcut for ``BoundaryService().calculate``."""
    return BoundaryService().calculate(page, per_page, total, path)

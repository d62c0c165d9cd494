"""
Custom exceptions for pagination requests.

Provides structured error types for the three ways a pagination request can
fail: no data source could be resolved, the supplied configuration is
unusable, or the requested page lies beyond the last page.
"""

from typing import Any


class PaginationError(Exception):
    """Base exception for pagination-related errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoDataSourceError(PaginationError):
    """
    Raised when neither an explicit nor a default data source is available.
    """

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No data source to paginate. Pass a data source explicitly "
                "or register one with set_default_source()."
            )
        super().__init__(message)


class InvalidConfigurationError(PaginationError):
    """
    Raised when pagination configuration cannot be used.

    Attributes:
        argument: The offending argument or value (or None)
        message: User-friendly error message
    """

    def __init__(self, message: str = None, argument: Any = None):
        self.argument = argument

        if message is None:
            message = f"Unrecognized pagination argument: {argument!r}"

        super().__init__(message)


class PageOutOfBoundsError(PaginationError):
    """
    Raised when the requested page exceeds the last available page.

    Attributes:
        page: The requested page
        last_page: The highest valid page for the current total
    """

    def __init__(self, page: int, last_page: int, message: str = None):
        self.page = page
        self.last_page = last_page

        if message is None:
            message = f"Page {page} is out of bounds (last page is {last_page})"

        super().__init__(message)


def get_user_friendly_error_message(error: Exception) -> str:
    """
    Convert a pagination error to a message suitable for API responses.

    Args:
        error: An exception raised while paginating

    Returns:
        A user-friendly error message
    """
    if isinstance(error, PageOutOfBoundsError):
        if error.last_page == 1:
            return f"Page {error.page} does not exist. There is only 1 page."
        return f"Page {error.page} does not exist. There are {error.last_page} pages."

    elif isinstance(error, PaginationError):
        return error.message

    else:
        return f"Pagination failed: {str(error)}"


def describe_argument(argument: Any) -> str:
    """Return a short type description used in log and error messages."""
    return type(argument).__name__

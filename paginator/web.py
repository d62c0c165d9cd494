"""
Flask helpers for paginated endpoints.

Reads ``?page=&per_page=`` from the current request and turns results and
pagination errors into JSON responses::

    @app.route("/api/records")
    def api_records():
        try:
            result = paginate_or_raise(config_from_request(), Record.query)
        except PaginationError as e:
            return pagination_error_response(e)
        return pagination_response(result, item_serializer=record_to_dict)
"""

from typing import Any, Callable, Optional
import logging

from flask import jsonify
from flask import request as current_request

from paginator.config import MAX_PER_PAGE, PAGE_PARAM, PER_PAGE_PARAM
from paginator.errors import (
    InvalidConfigurationError,
    NoDataSourceError,
    PageOutOfBoundsError,
    get_user_friendly_error_message,
)
from paginator.models.pagination import PaginationConfig, PaginationResult

logger = logging.getLogger(__name__)


def _read_count(args, name: str) -> int:
    """Read a positive integer query parameter, 0 when missing or malformed."""
    try:
        value = int(args.get(name, 0))
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed {name} parameter: {args.get(name)!r}")
        return 0
    return value if value > 0 else 0


def config_from_request(request=None) -> PaginationConfig:
    """
    Build a PaginationConfig from an HTTP request.

    Missing, malformed or non-positive numbers are left unset so they fall
    back to the defaults. The request path becomes the base path for links.

    Args:
        request: Flask request, the current request when omitted
    """
    if request is None:
        request = current_request

    page = _read_count(request.args, PAGE_PARAM)
    per_page = _read_count(request.args, PER_PAGE_PARAM)

    if MAX_PER_PAGE and per_page > MAX_PER_PAGE:
        per_page = MAX_PER_PAGE

    return PaginationConfig(page=page, per_page=per_page, path=request.path)


def pagination_response(
    result: PaginationResult,
    item_serializer: Optional[Callable[[Any], Any]] = None,
):
    """Return a JSON response for a pagination result."""
    return jsonify(result.to_dict(item_serializer))


def pagination_error_response(error: Exception):
    """
    Map a pagination error to a JSON error response and status code.

    Returns:
        Tuple of (response, status)
    """
    if isinstance(error, PageOutOfBoundsError):
        status = 404
    elif isinstance(error, InvalidConfigurationError):
        status = 400
    elif isinstance(error, NoDataSourceError):
        status = 500
    else:
        logger.error(f"Unexpected pagination failure: {error}")
        status = 500

    return jsonify({"error": get_user_friendly_error_message(error)}), status

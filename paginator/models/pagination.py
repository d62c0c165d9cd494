"""
Data model for pagination requests and results.

PaginationConfig and PageBoundaries are plain frozen dataclasses used inside
the services; PaginationResult is the pydantic contract handed back to callers
and serialized for API responses.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from paginator.config import DEFAULT_PAGE, DEFAULT_PATH, DEFAULT_PER_PAGE
from paginator.errors import InvalidConfigurationError

T = TypeVar('T')

URL_FIELDS = ("first_page_url", "last_page_url", "next_page_url", "previous_page_url")


def _check_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(
            f"{name} must be an integer, got {type(value).__name__}", argument=value
        )
    if value < 0:
        raise InvalidConfigurationError(f"{name} must not be negative, got {value}", argument=value)


@dataclass(frozen=True)
class PaginationConfig:
    """
    Requested page, page size and base path for page links.

    Zero values and the empty path mean "unset"; they are filled from the
    default config when merged and from the package defaults when normalized.
    """

    page: int = 0
    per_page: int = 0
    path: str = ""

    def __post_init__(self):
        _check_count("page", self.page)
        _check_count("per_page", self.per_page)
        if self.path is None:
            object.__setattr__(self, "path", "")
        elif not isinstance(self.path, str):
            raise InvalidConfigurationError(
                f"path must be a string, got {type(self.path).__name__}", argument=self.path
            )

    def merged_with(self, default: Optional["PaginationConfig"]) -> "PaginationConfig":
        """Fill unset fields one by one from ``default``."""
        if default is None:
            return self
        return replace(
            self,
            page=self.page or default.page,
            per_page=self.per_page or default.per_page,
            path=self.path or default.path,
        )

    def normalized(self) -> "PaginationConfig":
        """Return a copy with page and per_page of at least 1 and the default path filled in."""
        return replace(
            self,
            page=self.page or DEFAULT_PAGE,
            per_page=self.per_page or DEFAULT_PER_PAGE,
            path=self.path or DEFAULT_PATH,
        )


@dataclass(frozen=True)
class PageBoundaries:
    """Every field derived from page, per_page and total."""

    page: int
    per_page: int
    total: int
    last_page: int
    next_page: int
    previous_page: int
    from_index: int
    to_index: int
    first_page_url: Optional[str] = None
    last_page_url: Optional[str] = None
    next_page_url: Optional[str] = None
    previous_page_url: Optional[str] = None

    @property
    def offset(self) -> int:
        """Zero-based offset of the first record on the page."""
        return max(self.from_index - 1, 0)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class PaginationResult(BaseModel, Generic[T]):
    """One page of records together with its navigation metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int = Field(..., description="Current page number (1-based)")
    per_page: int = Field(..., description="Maximum items per page")
    next_page: int = Field(..., description="Next page, wraps to 1 after the last page")
    previous_page: int = Field(..., description="Previous page, wraps to the last page before page 1")
    last_page: int = Field(..., description="Highest valid page, 0 for an empty result set")
    total: int = Field(..., description="Total number of matching records")
    first_page_url: Optional[str] = Field(None, description="Link to page 1")
    last_page_url: Optional[str] = Field(None, description="Link to the last page")
    next_page_url: Optional[str] = Field(None, description="Link to the next page")
    previous_page_url: Optional[str] = Field(None, description="Link to the previous page")
    from_: int = Field(..., alias="from", description="1-based index of the first record on the page")
    to: int = Field(..., description="1-based index of the last record on the page")
    path: str = Field("", description="Base path used for page links")
    items: Tuple[T, ...] = Field(default_factory=tuple, description="Records on this page")

    @classmethod
    def from_boundaries(
        cls,
        boundaries: PageBoundaries,
        path: str,
        items=(),
    ) -> "PaginationResult[T]":
        """Assemble a result from calculated boundaries and fetched records."""
        return cls(
            page=boundaries.page,
            per_page=boundaries.per_page,
            next_page=boundaries.next_page,
            previous_page=boundaries.previous_page,
            last_page=boundaries.last_page,
            total=boundaries.total,
            first_page_url=boundaries.first_page_url,
            last_page_url=boundaries.last_page_url,
            next_page_url=boundaries.next_page_url,
            previous_page_url=boundaries.previous_page_url,
            from_=boundaries.from_index,
            to=boundaries.to_index,
            path=path,
            items=tuple(items),
        )

    def to_dict(self, item_serializer: Optional[Callable[[T], Any]] = None) -> Dict[str, Any]:
        """
        Convert to a dictionary for JSON serialization.

        URL fields are left out entirely when there is no link to show.

        Args:
            item_serializer: Optional callable applied to every item

        Returns:
            Dict with stable field names, ``items`` last
        """
        data = self.model_dump(by_alias=True, exclude={"items"})
        for key in URL_FIELDS:
            if data[key] is None:
                del data[key]

        if item_serializer is None:
            data["items"] = list(self.items)
        else:
            data["items"] = [item_serializer(item) for item in self.items]

        return data

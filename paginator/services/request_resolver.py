"""
Service for resolving pagination requests.

Turns caller-supplied configuration (page config, data source, filters) into a
fully populated request by applying the default precedence rules:

- an explicit data source wins over the default data source
- an explicit config is merged field by field with the default config
- with no config at all, page 1 of 25 items with an empty path is used
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple
import logging

from paginator.defaults import PaginationDefaults, get_defaults
from paginator.errors import InvalidConfigurationError, NoDataSourceError, describe_argument
from paginator.models.pagination import PaginationConfig
from paginator.repositories import DataSource, FilterTransformation, as_data_source, require_data_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRequest:
    """A request with every field filled in, ready to be executed."""

    config: PaginationConfig
    source: DataSource
    filters: Tuple[FilterTransformation, ...] = ()


@dataclass(frozen=True)
class PaginationRequest:
    """
    What the caller asked for, before defaults are applied.

    Build one directly or through the fluent helpers::

        request = PaginationRequest(config=PaginationConfig(page=2))
        request = request.with_source(source).where(only_active, newest_first)
    """

    config: Optional[PaginationConfig] = None
    source: Optional[DataSource] = None
    filters: Tuple[FilterTransformation, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.source is not None:
            object.__setattr__(self, "source", require_data_source(self.source))

        filters = tuple(self.filters)
        for transformation in filters:
            if not callable(transformation) or isinstance(transformation, type):
                raise InvalidConfigurationError(
                    f"Filter transformations must be callable, got {describe_argument(transformation)}",
                    argument=transformation,
                )
        object.__setattr__(self, "filters", filters)

    def with_config(self, config: PaginationConfig) -> "PaginationRequest":
        return replace(self, config=config)

    def with_source(self, source: DataSource) -> "PaginationRequest":
        return replace(self, source=source)

    def where(self, *filters: FilterTransformation) -> "PaginationRequest":
        """Append filter transformations after the existing ones."""
        return replace(self, filters=self.filters + tuple(filters))

    def resolve(self, defaults: Optional[PaginationDefaults] = None) -> ResolvedRequest:
        """
        Apply the defaults and return a complete request.

        Args:
            defaults: Defaults snapshot, the process-wide one when omitted

        Raises:
            NoDataSourceError: no explicit and no default data source
        """
        if defaults is None:
            defaults = get_defaults()

        source = self.source if self.source is not None else defaults.source
        if source is None:
            raise NoDataSourceError()

        return ResolvedRequest(
            config=resolve_config(self.config, defaults.config),
            source=source,
            filters=self.filters,
        )


def resolve_config(
    config: Optional[PaginationConfig],
    default: Optional[PaginationConfig],
) -> PaginationConfig:
    """
    Combine an explicit config with the default config.

    Args:
        config: Config passed by the caller (or None)
        default: Process or request default config (or None)

    Returns:
        Normalized config with page and per_page of at least 1 and the
        default path filled in
    """
    if config is None and default is None:
        return PaginationConfig().normalized()

    if config is None:
        return default.normalized()

    return config.merged_with(default).normalized()


def resolve_arguments(*arguments: Any, strict: bool = False) -> PaginationRequest:
    """
    Build a PaginationRequest from a loosely typed argument list.

    Each argument is classified by what it can do:

    - a DataSource or SQLAlchemy Query becomes the data source (last one wins)
    - a PaginationConfig becomes the config (last one wins, no merging)
    - any other callable except a class is a filter transformation, kept in
      argument order

    Anything else is skipped, or rejected with InvalidConfigurationError when
    ``strict`` is set.
    """
    config = None
    source = None
    filters = []

    for argument in arguments:
        if isinstance(argument, PaginationConfig):
            config = argument
            continue

        data_source = as_data_source(argument)
        if data_source is not None:
            source = data_source
            continue

        # Classes and builtin types are callable but never query transformations
        if callable(argument) and not isinstance(argument, type):
            filters.append(argument)
            continue

        if strict:
            raise InvalidConfigurationError(argument=argument)

        logger.debug(f"Ignoring unrecognized pagination argument of type {describe_argument(argument)}")

    return PaginationRequest(config=config, source=source, filters=tuple(filters))

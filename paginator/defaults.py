"""
Process-wide pagination defaults.

The defaults are kept as a single immutable ``PaginationDefaults`` snapshot.
Setters replace the snapshot as a whole, so a resolution that has already
read it never sees a half-updated value. Changing the defaults is still the
caller's job to synchronize; code that needs isolation (tests, threads
serving different tenants) should pass its own snapshot via ``defaults=``.
"""

from dataclasses import dataclass, replace
from typing import Optional
import logging

from paginator.errors import describe_argument
from paginator.models.pagination import PaginationConfig
from paginator.repositories import DataSource, require_data_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaginationDefaults:
    """Default config and data source used when a request omits them.

    A raw SQLAlchemy query passed as ``source`` is wrapped automatically.
    """

    config: Optional[PaginationConfig] = None
    source: Optional[DataSource] = None

    def __post_init__(self):
        if self.source is not None:
            object.__setattr__(self, "source", require_data_source(self.source))

    def with_config(self, config: Optional[PaginationConfig]) -> "PaginationDefaults":
        return replace(self, config=config)

    def with_source(self, source: Optional[DataSource]) -> "PaginationDefaults":
        return replace(self, source=source)


_defaults = PaginationDefaults()


def get_defaults() -> PaginationDefaults:
    """Return the current process-wide defaults snapshot."""
    return _defaults


def set_defaults(defaults: PaginationDefaults) -> None:
    global _defaults
    _defaults = defaults


def set_default_config(config: Optional[PaginationConfig]) -> None:
    """Set the config every request falls back to field by field."""
    set_defaults(_defaults.with_config(config))
    logger.info(f"Default pagination config set to {config}")


def set_default_source(source: Optional[DataSource]) -> None:
    """Set the data source used by requests that do not pass one."""
    set_defaults(_defaults.with_source(source))
    logger.info(f"Default data source set to {describe_argument(source)}")


def reset_defaults() -> None:
    """Forget all defaults. Intended for test isolation."""
    set_defaults(PaginationDefaults())

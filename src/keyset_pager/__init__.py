"""keyset-pager – keyset (cursor) and offset pagination over sorted queries.

Layers:

* ``kernel`` – errors, sort specifications, keyset expression trees
* ``application`` – the pagination adapter, items, pages and cursors
* ``adapters`` – SQLAlchemy and in-memory backends
* ``config`` / ``observability`` – settings and structured logging
"""
from keyset_pager.__version__ import __version__
from keyset_pager.application.pagination import (
    BoundaryCodec,
    KeysetItem,
    KeysetPage,
    OffsetPage,
    PageRequest,
    PaginationAdapter,
)
from keyset_pager.config import PaginationSettings
from keyset_pager.kernel.errors import (
    BaseError,
    ConfigurationError,
    ExecutionError,
    ValidationError,
)
from keyset_pager.kernel.ordering import (
    Boundary,
    BoundaryDirection,
    SortDirection,
    SortField,
    SortSpecification,
)

__all__ = [
    "BaseError",
    "Boundary",
    "BoundaryCodec",
    "BoundaryDirection",
    "ConfigurationError",
    "ExecutionError",
    "KeysetItem",
    "KeysetPage",
    "OffsetPage",
    "PageRequest",
    "PaginationAdapter",
    "PaginationSettings",
    "SortDirection",
    "SortField",
    "SortSpecification",
    "ValidationError",
    "__version__",
]

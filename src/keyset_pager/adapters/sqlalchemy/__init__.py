"""SQLAlchemy adapter – keyset pagination over SQLAlchemy 2.x ``Select`` statements."""
from keyset_pager.adapters.sqlalchemy.adapter import SqlAlchemyPaginationAdapter
from keyset_pager.adapters.sqlalchemy.dispatcher import SqlAlchemyExpressionDispatcher
from keyset_pager.adapters.sqlalchemy.executor import SqlAlchemyQueryExecutor
from keyset_pager.adapters.sqlalchemy.ordering import extract_ordering
from keyset_pager.adapters.sqlalchemy.types import (
    SchemaLookup,
    ShapeHeuristic,
    default_type_resolver,
)

__all__ = [
    "SchemaLookup",
    "ShapeHeuristic",
    "SqlAlchemyExpressionDispatcher",
    "SqlAlchemyPaginationAdapter",
    "SqlAlchemyQueryExecutor",
    "default_type_resolver",
    "extract_ordering",
]

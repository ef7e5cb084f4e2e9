"""In-memory adapter – reference backend over rows held in a list."""
from keyset_pager.adapters.memory.dispatcher import InMemoryExpressionDispatcher
from keyset_pager.adapters.memory.executor import InMemoryQueryExecutor
from keyset_pager.adapters.memory.predicates import (
    AllOf,
    AnyOf,
    FieldComparison,
    RowPredicate,
    read_field,
)

__all__ = [
    "AllOf",
    "AnyOf",
    "FieldComparison",
    "InMemoryExpressionDispatcher",
    "InMemoryQueryExecutor",
    "RowPredicate",
    "read_field",
]

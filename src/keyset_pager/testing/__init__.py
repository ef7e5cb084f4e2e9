"""Testing helpers – hypothesis strategies."""
from keyset_pager.testing.strategies import (
    boundary_strategy,
    row_strategy,
    sort_specification_strategy,
)

__all__ = ["boundary_strategy", "row_strategy", "sort_specification_strategy"]

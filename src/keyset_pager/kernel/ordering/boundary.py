"""Ordering – Boundary and BoundaryDirection."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

Boundary = Mapping[str, Any]
"""Sort-column values of one row, keyed by field name, used as a cursor."""


class BoundaryDirection(str, Enum):
    """Which side of the boundary the requested page lies on.

    ``LOWER`` asks for the rows after the boundary (next page); ``UPPER`` asks
    for the rows before it (previous page). Both come back in forward order.
    """

    LOWER = "lower"
    UPPER = "upper"


__all__ = ["Boundary", "BoundaryDirection"]

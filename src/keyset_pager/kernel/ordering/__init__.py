"""Kernel ordering – sort descriptors and pagination boundaries."""
from keyset_pager.kernel.ordering.boundary import Boundary, BoundaryDirection
from keyset_pager.kernel.ordering.sort import SortDirection, SortField, SortSpecification

__all__ = ["Boundary", "BoundaryDirection", "SortDirection", "SortField", "SortSpecification"]

"""Application pagination – QuerySpec, the per-call working copy of a query."""
from __future__ import annotations

import dataclasses
from typing import Any

from keyset_pager.kernel.ordering import SortSpecification


@dataclasses.dataclass(frozen=True)
class QuerySpec:
    """What a single pagination call asks the executor to run.

    ``ordering=None`` keeps the source query's own ordering. ``predicate`` is
    backend-native (produced by that backend's dispatcher) and is AND-ed with
    the source query's filters. ``boundary_fields`` are projected after the
    payload columns, in order.
    """

    ordering: SortSpecification | None = None
    predicate: Any | None = None
    boundary_fields: tuple[str, ...] = ()
    offset: int = 0
    limit: int | None = None

    def bounded(self, offset: int, limit: int | None) -> "QuerySpec":
        return dataclasses.replace(self, offset=offset, limit=limit)


__all__ = ["QuerySpec"]

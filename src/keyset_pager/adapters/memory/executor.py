"""In-memory adapter – InMemoryQueryExecutor over a list of rows."""
from __future__ import annotations

import functools
from typing import Any, Iterable, Mapping, Sequence

from keyset_pager.adapters.memory.dispatcher import InMemoryExpressionDispatcher
from keyset_pager.adapters.memory.predicates import RowPredicate, read_field
from keyset_pager.application.pagination.query import QuerySpec
from keyset_pager.kernel.expressions import QueryParameter, TypeResolver
from keyset_pager.kernel.ordering import SortDirection, SortSpecification


class InMemoryQueryExecutor:
    """Executes query specs against rows held in memory.

    Rows may be mappings or plain objects. ``ordering`` plays the role of the
    source query's ORDER BY and ``where`` the role of its existing filters.
    With ``countable=False`` the executor behaves like a streaming source
    whose size is unknown, so :meth:`count` returns ``None``.
    """

    def __init__(
        self,
        rows: Iterable[Any],
        ordering: Sequence[tuple[str, str]],
        *,
        where: RowPredicate | None = None,
        offset: int = 0,
        limit: int | None = None,
        countable: bool = True,
        type_resolver: TypeResolver | None = None,
    ) -> None:
        self._rows = list(rows)
        self._ordering = list(ordering)
        self._where = where
        self._offset = offset
        self._limit = limit
        self._countable = countable
        self._type_resolver = type_resolver

    def declared_ordering(self) -> list[tuple[str, str]]:
        return list(self._ordering)

    def declared_bounds(self) -> tuple[int, int | None]:
        return self._offset, self._limit

    def dispatcher(self, *, parameter_prefix: str) -> InMemoryExpressionDispatcher:
        return InMemoryExpressionDispatcher(
            parameter_prefix=parameter_prefix, type_resolver=self._type_resolver
        )

    async def fetch(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,  # noqa: ARG002
    ) -> list[tuple[Any, ...]]:
        rows = self._select(spec, parameters)
        return [
            (row, *(read_field(row, field) for field in spec.boundary_fields))
            for row in rows
        ]

    async def count(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,  # noqa: ARG002
    ) -> int | None:
        if not self._countable:
            return None
        return len(self._select(spec, parameters))

    def _select(self, spec: QuerySpec, parameters: Sequence[QueryParameter]) -> list[Any]:
        values = {p.name: p.value for p in parameters}
        rows = [
            row for row in self._rows
            if (self._where is None or self._where.is_satisfied_by(row, values))
            and (spec.predicate is None or spec.predicate.is_satisfied_by(row, values))
        ]
        ordering = spec.ordering or SortSpecification.derive(self._ordering)
        rows.sort(key=functools.cmp_to_key(functools.partial(_compare_rows, ordering)))
        end = None if spec.limit is None else spec.offset + spec.limit
        return rows[spec.offset:end]


def _compare_rows(ordering: SortSpecification, left: Any, right: Any) -> int:
    for sort_field in ordering:
        a = read_field(left, sort_field.field)
        b = read_field(right, sort_field.field)
        if a == b:
            continue
        result = -1 if a < b else 1
        return result if sort_field.direction is SortDirection.ASC else -result
    return 0


__all__ = ["InMemoryQueryExecutor"]

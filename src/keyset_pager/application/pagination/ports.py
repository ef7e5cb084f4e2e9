"""Application pagination – collaborator ports."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from keyset_pager.application.pagination.query import QuerySpec
from keyset_pager.kernel.expressions import ExpressionDispatcher, QueryParameter


@runtime_checkable
class QueryExecutor(Protocol):
    """Port: runs a :class:`QuerySpec` against one backend.

    ``fetch`` returns raw rows as sequences: the payload column(s) followed by
    one value per ``spec.boundary_fields`` entry. Rows that name their columns
    through ``_fields`` (SQLAlchemy ``Row``, named tuples) keep those names in
    multi-column payloads. ``count`` returns ``None`` when
    the backend cannot tell how many rows match. ``execution_options`` are
    passed to the backend untouched (timeouts, cancellation and the like).
    """

    def declared_ordering(self) -> Sequence[tuple[str, str]]: ...

    def declared_bounds(self) -> tuple[int, int | None]: ...

    def dispatcher(self, *, parameter_prefix: str) -> ExpressionDispatcher: ...

    async def fetch(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> list[Sequence[Any]]: ...

    async def count(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int | None: ...


__all__ = ["QueryExecutor"]

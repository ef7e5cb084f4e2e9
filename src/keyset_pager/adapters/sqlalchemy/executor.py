"""SQLAlchemy adapter – SqlAlchemyQueryExecutor."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from keyset_pager.adapters.sqlalchemy.dispatcher import SqlAlchemyExpressionDispatcher
from keyset_pager.adapters.sqlalchemy.ordering import extract_ordering
from keyset_pager.adapters.sqlalchemy.types import default_type_resolver
from keyset_pager.application.pagination.query import QuerySpec
from keyset_pager.kernel.errors import UnresolvableFieldError
from keyset_pager.kernel.expressions import QueryParameter
from keyset_pager.kernel.ordering import SortDirection


class SqlAlchemyQueryExecutor:
    """Runs query specs as SQLAlchemy 2.x statements on an ``AsyncSession``.

    The source ``Select`` is never modified; every call derives a new
    statement from it (``Select`` is generative).
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        *,
        type_mapping: Mapping[str, Any] | None = None,
        boundary_label_prefix: str = "keyset_boundary",
    ) -> None:
        self._session = session
        self._statement = statement
        self._type_mapping = dict(type_mapping or {})
        self._label_prefix = boundary_label_prefix
        self._ordering, self._columns = extract_ordering(statement)

    @property
    def statement(self) -> Select[Any]:
        return self._statement

    def declared_ordering(self) -> list[tuple[str, str]]:
        return list(self._ordering)

    def declared_bounds(self) -> tuple[int, int | None]:
        return self._statement._offset or 0, self._statement._limit

    def dispatcher(self, *, parameter_prefix: str) -> SqlAlchemyExpressionDispatcher:
        return SqlAlchemyExpressionDispatcher(
            self._columns,
            parameter_prefix=parameter_prefix,
            type_resolver=default_type_resolver(self._columns, self._type_mapping),
        )

    def build(self, spec: QuerySpec) -> Select[Any]:
        """Return the statement *spec* describes, derived from the source query."""
        statement = self._statement
        if spec.ordering is not None:
            statement = statement.order_by(None).order_by(
                *(self._order_clause(f.field, f.direction) for f in spec.ordering)
            )
        if spec.predicate is not None:
            statement = statement.where(spec.predicate)
        for index, field in enumerate(spec.boundary_fields, start=1):
            statement = statement.add_columns(
                self._column(field).label(f"{self._label_prefix}_{index}")
            )
        if spec.offset:
            statement = statement.offset(spec.offset)
        if spec.limit is not None:
            statement = statement.limit(spec.limit)
        return statement

    async def fetch(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> list[Row[Any]]:
        result = await self._session.execute(
            self.build(spec),
            _values(parameters),
            execution_options=execution_options or {},
        )
        return list(result.all())

    async def count(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int | None:
        inner = self.build(spec).order_by(None).subquery()
        result = await self._session.execute(
            select(func.count()).select_from(inner),
            _values(parameters),
            execution_options=execution_options or {},
        )
        return result.scalar()

    def _column(self, field: str) -> ColumnElement[Any]:
        try:
            return self._columns[field]
        except KeyError:
            raise UnresolvableFieldError(field, "not an ordered column of the query") from None

    def _order_clause(self, field: str, direction: SortDirection) -> ColumnElement[Any]:
        column = self._column(field)
        return column.asc() if direction is SortDirection.ASC else column.desc()


def _values(parameters: Sequence[QueryParameter]) -> dict[str, Any] | None:
    if not parameters:
        return None
    return {p.name: p.value for p in parameters}


__all__ = ["SqlAlchemyQueryExecutor"]

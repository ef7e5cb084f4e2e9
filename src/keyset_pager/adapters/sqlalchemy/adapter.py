"""SQLAlchemy adapter – SqlAlchemyPaginationAdapter."""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from keyset_pager.adapters.sqlalchemy.executor import SqlAlchemyQueryExecutor
from keyset_pager.application.pagination.adapter import PaginationAdapter
from keyset_pager.config.settings import PaginationSettings

T = TypeVar("T")


class SqlAlchemyPaginationAdapter(PaginationAdapter[T]):
    """Keyset/offset pagination for an ordered, unbounded ``Select``.

    Example::

        stmt = select(Person).order_by(Person.age, Person.id)
        adapter = SqlAlchemyPaginationAdapter(session, stmt)
        first = await adapter.get_keyset_items(0, 20)
        after = await adapter.get_keyset_items(0, 20, first[-1].boundary)

    ``type_mapping`` pins the bind type of individual fields
    (``{"people.created_at": DateTime(timezone=True)}``).
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        *,
        type_mapping: Mapping[str, Any] | None = None,
        index_by: str | None = None,
        settings: PaginationSettings | None = None,
    ) -> None:
        settings = settings or PaginationSettings()
        executor = SqlAlchemyQueryExecutor(
            session,
            statement,
            type_mapping=type_mapping,
            boundary_label_prefix=settings.boundary_label_prefix,
        )
        super().__init__(executor, index_by=index_by, settings=settings)


__all__ = ["SqlAlchemyPaginationAdapter"]

"""Application pagination – PaginationAdapter.

Exposes keyset and offset pagination over any :class:`QueryExecutor`.
The adapter never touches the executor's source query: each call describes
its own :class:`QuerySpec` and the executor derives a fresh statement from it.
"""
from __future__ import annotations

import collections
import functools
from typing import Any, Generic, Mapping, Sequence, TypeVar

from keyset_pager.application.pagination.counter import Counter
from keyset_pager.application.pagination.items import IndexResolver, KeysetItem
from keyset_pager.application.pagination.page import KeysetPage, OffsetPage
from keyset_pager.application.pagination.page_request import PageRequest
from keyset_pager.application.pagination.ports import QueryExecutor
from keyset_pager.application.pagination.query import QuerySpec
from keyset_pager.config.settings import PaginationSettings
from keyset_pager.kernel.errors import (
    ConfigurationError,
    UnboundedSourceRequiredError,
    backend_faults,
)
from keyset_pager.kernel.expressions import KeysetExpressionCalculator, QueryParameter
from keyset_pager.kernel.ordering import Boundary, BoundaryDirection, SortSpecification
from keyset_pager.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class PaginationAdapter(Generic[T]):
    """Keyset and offset pagination over one source query.

    Args:
        executor: Backend collaborator wrapping the source query.
        index_by: Payload field used as the item key; row position if ``None``.
        settings: Parameter naming and related tunables.

    Raises:
        UnboundedSourceRequiredError: the source query already has an offset
            or a limit.
        InvalidOrderingError: the source query has no usable ordering.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        index_by: str | None = None,
        settings: PaginationSettings | None = None,
    ) -> None:
        self._settings = settings or PaginationSettings()

        offset, limit = executor.declared_bounds()
        if offset != 0 or limit is not None:
            logger.warning("pagination_source_bounded", offset=offset, limit=limit)
            raise UnboundedSourceRequiredError(offset, limit)

        self._executor = executor
        self._ordering = SortSpecification.derive(executor.declared_ordering())
        self._dispatcher = executor.dispatcher(parameter_prefix=self._settings.parameter_prefix)
        self._counter = Counter(executor)
        self._index_by = index_by

    @property
    def ordering(self) -> SortSpecification:
        """The source query's ordering, validated once at construction."""
        return self._ordering

    # Counting ------------------------------------------------------------

    async def count_items(
        self, *, execution_options: Mapping[str, Any] | None = None
    ) -> int | None:
        """Total rows of the unbounded source query, or ``None`` if unknown."""
        return await self._counter.count(QuerySpec(), execution_options=execution_options)

    async def count_keyset_items(
        self,
        offset: int,
        limit: int,
        boundary: Boundary | None = None,
        direction: BoundaryDirection = BoundaryDirection.LOWER,
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int:
        """Count the rows a matching :meth:`get_keyset_items` call would see.

        The count honours *offset* and *limit*. Raises
        ``CountUnavailableError`` if the backend cannot count.
        """
        spec, parameters = self._keyset_query(offset, limit, boundary, direction)
        result = await self._counter.require(
            spec, parameters, execution_options=execution_options
        )
        logger.debug(
            "keyset_items_counted",
            direction=BoundaryDirection(direction).value,
            offset=offset,
            limit=limit,
            count=result,
        )
        return result

    async def count_offset_items(
        self,
        offset: int = 0,
        limit: int | None = None,
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int:
        if limit is None:
            raise ConfigurationError("Limit must be set when counting offset items")
        self._check_window(offset, limit)
        spec = QuerySpec(ordering=self._ordering).bounded(offset, limit)
        return await self._counter.require(spec, execution_options=execution_options)

    # Fetching ------------------------------------------------------------

    async def get_keyset_items(
        self,
        offset: int,
        limit: int,
        boundary: Boundary | None = None,
        direction: BoundaryDirection = BoundaryDirection.LOWER,
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> list[KeysetItem[T]]:
        """Fetch the rows after (``LOWER``) or before (``UPPER``) *boundary*.

        Items always come back in the source query's forward order.
        """
        direction = BoundaryDirection(direction)
        spec, parameters = self._keyset_query(offset, limit, boundary, direction)

        with backend_faults("fetch"):
            rows = await self._executor.fetch(
                spec, parameters, execution_options=execution_options
            )

        if direction is BoundaryDirection.UPPER:
            rows = list(reversed(rows))

        items = [self._to_item(position, row) for position, row in enumerate(rows)]
        logger.debug(
            "keyset_items_fetched",
            direction=direction.value,
            offset=offset,
            limit=limit,
            has_boundary=bool(boundary),
            rows=len(items),
        )
        return items

    async def get_offset_items(
        self,
        offset: int,
        limit: int,
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> list[T]:
        """Plain offset/limit fetch in the source query's order."""
        self._check_window(offset, limit)
        with backend_faults("fetch"):
            rows = await self._executor.fetch(
                QuerySpec().bounded(offset, limit), execution_options=execution_options
            )
        logger.debug("offset_items_fetched", offset=offset, limit=limit, rows=len(rows))
        return [self._payload(list(row), _field_names(row)) for row in rows]

    # Page helpers --------------------------------------------------------

    async def get_keyset_page(
        self,
        limit: int,
        boundary: Boundary | None = None,
        direction: BoundaryDirection = BoundaryDirection.LOWER,
        *,
        with_total: bool = False,
        execution_options: Mapping[str, Any] | None = None,
    ) -> KeysetPage[T]:
        items = await self.get_keyset_items(
            0, limit, boundary, direction, execution_options=execution_options
        )
        total = await self.count_items(execution_options=execution_options) if with_total else None
        return KeysetPage(items=items, total=total)

    async def get_offset_page(
        self,
        request: PageRequest,
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> OffsetPage[T]:
        items = await self.get_offset_items(
            request.offset, request.size, execution_options=execution_options
        )
        total = await self._counter.require(QuerySpec(), execution_options=execution_options)
        return OffsetPage.of(items, total, request)

    # Internals -----------------------------------------------------------

    def _keyset_query(
        self,
        offset: int,
        limit: int,
        boundary: Boundary | None,
        direction: BoundaryDirection,
    ) -> tuple[QuerySpec, tuple[QueryParameter, ...]]:
        self._check_window(offset, limit)
        direction = BoundaryDirection(direction)

        ordering = self._ordering
        if direction is BoundaryDirection.UPPER:
            ordering = ordering.reversed()

        predicate: Any | None = None
        parameters: tuple[QueryParameter, ...] = ()
        expression = KeysetExpressionCalculator.calculate(ordering, boundary)
        if expression is not None:
            rendered = self._dispatcher.render(expression)
            predicate, parameters = rendered.predicate, rendered.parameters

        spec = QuerySpec(
            ordering=ordering,
            predicate=predicate,
            boundary_fields=self._ordering.field_names,
        ).bounded(offset, limit)
        return spec, parameters

    def _to_item(self, position: int, row: Sequence[Any]) -> KeysetItem[T]:
        values = list(row)
        field_names = self._ordering.field_names

        popped: dict[str, Any] = {}
        for field in reversed(field_names):
            popped[field] = values.pop()
        boundary = {field: popped[field] for field in field_names}

        payload = self._payload(values, _field_names(row))
        key = position if self._index_by is None else IndexResolver.resolve(payload, self._index_by)
        return KeysetItem(key=key, value=payload, boundary=boundary)

    @staticmethod
    def _payload(values: list[Any], names: tuple[str, ...] | None = None) -> Any:
        if len(values) == 1:
            return values[0]
        if names:
            return _payload_row(names[: len(values)])(*values)
        return tuple(values)

    @staticmethod
    def _check_window(offset: int, limit: int | None) -> None:
        if offset < 0:
            raise ConfigurationError(f"offset must be >= 0, got {offset}").with_detail(offset=offset)
        if limit is not None and limit < 0:
            raise ConfigurationError(f"limit must be >= 0, got {limit}").with_detail(limit=limit)


def _field_names(row: Any) -> tuple[str, ...] | None:
    fields = getattr(row, "_fields", None)
    return tuple(fields) if fields else None


@functools.lru_cache(maxsize=256)
def _payload_row(names: tuple[str, ...]) -> type:
    # invalid or repeated column names become _0, _1, ...
    return collections.namedtuple("PayloadRow", names, rename=True)


__all__ = ["PaginationAdapter"]

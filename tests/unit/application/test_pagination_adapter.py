"""Unit tests for PaginationAdapter over the in-memory backend."""

from __future__ import annotations

import asyncio
import collections
import dataclasses
import operator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from structlog.testing import capture_logs

from keyset_pager.adapters.memory import FieldComparison, InMemoryQueryExecutor
from keyset_pager.application.pagination import KeysetItem, PageRequest, PaginationAdapter, QuerySpec
from keyset_pager.config import PaginationSettings
from keyset_pager.kernel.errors import (
    ConfigurationError,
    CountUnavailableError,
    ExecutionError,
    InvalidOrderingError,
    UnboundedSourceRequiredError,
)
from keyset_pager.kernel.expressions import QueryParameter
from keyset_pager.kernel.ordering import BoundaryDirection, SortDirection


def _people(n: int = 25) -> list[dict[str, int]]:
    return [{"id": i, "age": 20 + i % 5} for i in range(1, n + 1)]


def _forward(rows: list[dict[str, int]]) -> list[dict[str, int]]:
    return sorted(rows, key=lambda r: (r["age"], r["id"]))


def _adapter(rows: list[Any] | None = None, **kwargs: Any) -> PaginationAdapter[Any]:
    ordering = kwargs.pop("ordering", [("age", "ASC"), ("id", "ASC")])
    adapter_kwargs = {k: kwargs.pop(k) for k in ("index_by", "settings") if k in kwargs}
    executor = InMemoryQueryExecutor(_people() if rows is None else rows, ordering, **kwargs)
    return PaginationAdapter(executor, **adapter_kwargs)


class TestConstruction:
    def test_bounded_source_is_rejected_before_execution(self) -> None:
        executor = MagicMock()
        executor.declared_bounds.return_value = (0, 5)
        with pytest.raises(UnboundedSourceRequiredError) as info:
            PaginationAdapter(executor)
        assert info.value.limit == 5
        executor.fetch.assert_not_called()
        executor.count.assert_not_called()
        executor.declared_ordering.assert_not_called()

    def test_offset_source_is_rejected(self) -> None:
        with pytest.raises(UnboundedSourceRequiredError):
            _adapter(offset=3)

    def test_bounded_source_logs_warning(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(UnboundedSourceRequiredError):
                _adapter(limit=10)
        assert logs[0]["event"] == "pagination_source_bounded"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["limit"] == 10

    def test_unordered_source_is_rejected(self) -> None:
        with pytest.raises(InvalidOrderingError):
            _adapter(ordering=[])

    def test_ordering_is_derived_once(self) -> None:
        adapter = _adapter(ordering=[("age", "DESC"), ("id", "ASC")])
        assert adapter.ordering.field_names == ("age", "id")
        assert adapter.ordering.direction_of("age") is SortDirection.DESC


class TestOffsetItems:
    def test_first_window(self) -> None:
        async def run() -> None:
            items = await _adapter(ordering=[("id", "ASC")]).get_offset_items(0, 10)
            assert [r["id"] for r in items] == list(range(1, 11))

        asyncio.run(run())

    def test_tail_window_is_short(self) -> None:
        async def run() -> None:
            items = await _adapter(ordering=[("id", "ASC")]).get_offset_items(20, 10)
            assert [r["id"] for r in items] == [21, 22, 23, 24, 25]

        asyncio.run(run())

    def test_negative_offset_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            asyncio.run(_adapter().get_offset_items(-1, 10))

    def test_offset_page(self) -> None:
        async def run() -> None:
            page = await _adapter(ordering=[("id", "ASC")]).get_offset_page(PageRequest(page=3, size=10))
            assert [r["id"] for r in page.items] == [21, 22, 23, 24, 25]
            assert page.total == 25
            assert page.total_pages == 3
            assert page.has_next is False

        asyncio.run(run())


class TestKeysetItems:
    def test_no_boundary_returns_first_rows(self) -> None:
        async def run() -> None:
            items = await _adapter().get_keyset_items(0, 5)
            assert [i.value for i in items] == _forward(_people())[:5]
            assert [i.key for i in items] == [0, 1, 2, 3, 4]

        asyncio.run(run())

    def test_item_boundary_follows_sort_order(self) -> None:
        async def run() -> None:
            items = await _adapter().get_keyset_items(0, 1)
            item = items[0]
            assert isinstance(item, KeysetItem)
            assert list(item.boundary) == ["age", "id"]
            assert item.boundary == {"age": 20, "id": 5}
            assert item.boundary_values == (20, 5)

        asyncio.run(run())

    def test_lower_boundary_continues_after(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            items = await adapter.get_keyset_items(0, 3, {"age": 21, "id": 1})
            assert [i.value["id"] for i in items] == [6, 11, 16]

        asyncio.run(run())

    def test_upper_boundary_returns_forward_order(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            forward = _forward(_people())
            pivot = forward[10]
            items = await adapter.get_keyset_items(
                0, 4, {"age": pivot["age"], "id": pivot["id"]}, BoundaryDirection.UPPER
            )
            assert [i.value for i in items] == forward[6:10]

        asyncio.run(run())

    def test_upper_accepts_string_direction(self) -> None:
        async def run() -> None:
            adapter = _adapter(ordering=[("id", "ASC")])
            items = await adapter.get_keyset_items(0, 2, {"id": 10}, "upper")  # type: ignore[arg-type]
            assert [i.value["id"] for i in items] == [8, 9]

        asyncio.run(run())

    def test_descending_single_column(self) -> None:
        async def run() -> None:
            adapter = _adapter(ordering=[("id", "DESC")])
            items = await adapter.get_keyset_items(0, 3, {"id": 10})
            assert [i.value["id"] for i in items] == [9, 8, 7]

        asyncio.run(run())

    def test_offset_applies_after_boundary(self) -> None:
        async def run() -> None:
            adapter = _adapter(ordering=[("id", "ASC")])
            items = await adapter.get_keyset_items(2, 3, {"id": 10})
            assert [i.value["id"] for i in items] == [13, 14, 15]

        asyncio.run(run())

    def test_empty_boundary_reads_from_the_start(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            items = await adapter.get_keyset_items(0, 3, {})
            assert [i.value for i in items] == _forward(_people())[:3]
            assert await adapter.count_keyset_items(0, 100, {}) == 25

        asyncio.run(run())

    def test_named_rows_keep_field_names_in_payload(self) -> None:
        class NamedRows(InMemoryQueryExecutor):
            async def fetch(self, spec, parameters=(), *, execution_options=None):  # type: ignore[no-untyped-def]
                rows = await super().fetch(spec, parameters, execution_options=execution_options)
                Shaped = collections.namedtuple("Shaped", ["id", "label", "b1"])
                return [Shaped(r[0]["id"], f"n{r[0]['id']}", r[1]) for r in rows]

        async def run() -> None:
            adapter = PaginationAdapter(NamedRows(_people(), [("id", "ASC")]), index_by="label")
            items = await adapter.get_keyset_items(0, 2, {"id": 7})
            assert [i.key for i in items] == ["n8", "n9"]
            assert items[0].value == (8, "n8")
            assert items[0].value.label == "n8"

        asyncio.run(run())

    def test_exhausted_boundary_is_empty(self) -> None:
        async def run() -> None:
            adapter = _adapter(ordering=[("id", "ASC")])
            assert await adapter.get_keyset_items(0, 10, {"id": 25}) == []

        asyncio.run(run())

    def test_boundary_with_foreign_field(self) -> None:
        with pytest.raises(ConfigurationError):
            asyncio.run(_adapter().get_keyset_items(0, 10, {"age": 20, "id": 1, "name": "x"}))

    def test_existing_filters_are_kept(self) -> None:
        async def run() -> None:
            adult = FieldComparison("age", operator.ge, "min_age")

            class Filtered(InMemoryQueryExecutor):
                async def fetch(self, spec, parameters=(), *, execution_options=None):  # type: ignore[no-untyped-def]
                    return await super().fetch(
                        spec, (*parameters, QueryParameter("min_age", 24)),
                        execution_options=execution_options,
                    )

            adapter = PaginationAdapter(
                Filtered(_people(), [("id", "ASC")], where=adult)
            )
            items = await adapter.get_keyset_items(0, 10, {"id": 5})
            assert [i.value["id"] for i in items] == [9, 14, 19, 24]

        asyncio.run(run())

    def test_index_by_uses_payload_field(self) -> None:
        async def run() -> None:
            items = await _adapter(index_by="id").get_keyset_items(0, 3)
            assert [i.key for i in items] == [5, 10, 15]

        asyncio.run(run())

    def test_index_by_object_attribute(self) -> None:
        @dataclasses.dataclass
        class Person:
            id: int
            age: int

        async def run() -> None:
            rows = [Person(**r) for r in _people(6)]
            items = await _adapter(rows, ordering=[("id", "DESC")], index_by="id").get_keyset_items(0, 2)
            assert [i.key for i in items] == [6, 5]
            assert items[0].value is rows[5]

        asyncio.run(run())

    def test_index_by_missing_field(self) -> None:
        with pytest.raises(ConfigurationError):
            asyncio.run(_adapter(index_by="name").get_keyset_items(0, 3))

    def test_custom_parameter_prefix(self) -> None:
        async def run() -> None:
            executor = InMemoryQueryExecutor(_people(), [("id", "ASC")])
            executor.fetch = AsyncMock(return_value=[])  # type: ignore[method-assign]
            adapter = PaginationAdapter(executor, settings=PaginationSettings(parameter_prefix="cur"))
            await adapter.get_keyset_items(0, 3, {"id": 1})
            parameters = executor.fetch.await_args.args[1]
            assert [p.name for p in parameters] == ["cur_1"]

        asyncio.run(run())

    def test_execution_options_pass_through(self) -> None:
        async def run() -> None:
            executor = InMemoryQueryExecutor(_people(), [("id", "ASC")])
            executor.fetch = AsyncMock(return_value=[])  # type: ignore[method-assign]
            adapter = PaginationAdapter(executor)
            options = {"timeout": 5}
            await adapter.get_keyset_items(0, 3, execution_options=options)
            assert executor.fetch.await_args.kwargs["execution_options"] is options

        asyncio.run(run())

    def test_source_spec_is_fresh_per_call(self) -> None:
        async def run() -> None:
            executor = InMemoryQueryExecutor(_people(), [("id", "ASC")])
            executor.fetch = AsyncMock(return_value=[])  # type: ignore[method-assign]
            adapter = PaginationAdapter(executor)
            await adapter.get_keyset_items(0, 3, {"id": 1})
            await adapter.get_keyset_items(0, 3)
            second: QuerySpec = executor.fetch.await_args.args[0]
            assert second.predicate is None
            assert second.limit == 3

        asyncio.run(run())

    def test_backend_failure_is_wrapped(self) -> None:
        executor = InMemoryQueryExecutor(_people(), [("id", "ASC")])
        executor.fetch = AsyncMock(side_effect=RuntimeError("connection reset"))  # type: ignore[method-assign]
        adapter = PaginationAdapter(executor)
        with pytest.raises(ExecutionError) as info:
            asyncio.run(adapter.get_keyset_items(0, 3))
        assert isinstance(info.value.cause, RuntimeError)


class TestContinuation:
    @settings(max_examples=30, deadline=None)
    @given(
        st.lists(
            st.fixed_dictionaries({"a": st.integers(0, 3), "b": st.integers(0, 3)}),
            max_size=30,
        ),
        st.integers(min_value=1, max_value=7),
        st.sampled_from(["ASC", "DESC"]),
    )
    def test_walking_lower_boundaries_visits_every_row_once(
        self, raw: list[dict[str, int]], limit: int, direction: str
    ) -> None:
        rows = [dict(r, id=i) for i, r in enumerate(raw)]
        ordering = [("a", direction), ("b", "ASC"), ("id", "ASC")]

        async def run() -> tuple[list[dict[str, int]], list[dict[str, int]]]:
            adapter = _adapter(rows, ordering=ordering)
            everything = await adapter.get_offset_items(0, len(rows) + 1)
            seen: list[dict[str, int]] = []
            boundary = None
            while True:
                items = await adapter.get_keyset_items(0, limit, boundary)
                seen.extend(i.value for i in items)
                if len(items) < limit:
                    return seen, everything
                boundary = items[-1].boundary

        seen, everything = asyncio.run(run())
        assert seen == everything
        assert len(seen) == len(rows)

    def test_upper_then_lower_round_trip(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            first = await adapter.get_keyset_page(5)
            second = await adapter.get_keyset_page(5, first.last_boundary)
            back = await adapter.get_keyset_page(5, second.first_boundary, BoundaryDirection.UPPER)
            assert back.values == first.values

        asyncio.run(run())


class TestCounts:
    def test_count_items(self) -> None:
        assert asyncio.run(_adapter().count_items()) == 25

    def test_count_keyset_items_matches_count_items_for_large_limit(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            assert await adapter.count_keyset_items(0, 100) == await adapter.count_items()

        asyncio.run(run())

    def test_count_keyset_items_honours_boundary_and_window(self) -> None:
        async def run() -> None:
            adapter = _adapter(ordering=[("id", "ASC")])
            assert await adapter.count_keyset_items(0, 100, {"id": 20}) == 5
            assert await adapter.count_keyset_items(0, 3, {"id": 20}) == 3
            assert await adapter.count_keyset_items(0, 100, {"id": 20}, BoundaryDirection.UPPER) == 19

        asyncio.run(run())

    def test_count_offset_items(self) -> None:
        async def run() -> None:
            adapter = _adapter()
            assert await adapter.count_offset_items(20, 10) == 5
            assert await adapter.count_offset_items(0, 10) == 10

        asyncio.run(run())

    def test_count_offset_items_requires_limit(self) -> None:
        with pytest.raises(ConfigurationError):
            asyncio.run(_adapter().count_offset_items(0))

    def test_uncountable_backend(self) -> None:
        async def run() -> None:
            adapter = _adapter(countable=False)
            assert await adapter.count_items() is None
            with pytest.raises(CountUnavailableError):
                await adapter.count_keyset_items(0, 10)
            with pytest.raises(CountUnavailableError):
                await adapter.count_offset_items(0, 10)

        asyncio.run(run())

    def test_keyset_page_total(self) -> None:
        async def run() -> None:
            page = await _adapter().get_keyset_page(5, with_total=True)
            assert page.total == 25
            assert len(page) == 5

        asyncio.run(run())

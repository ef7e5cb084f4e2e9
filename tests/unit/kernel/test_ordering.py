"""Unit tests for sort specifications and boundaries."""

from __future__ import annotations

import pytest
from hypothesis import given

from keyset_pager.kernel.errors import ConfigurationError, InvalidOrderingError
from keyset_pager.kernel.ordering import (
    BoundaryDirection,
    SortDirection,
    SortField,
    SortSpecification,
)
from keyset_pager.testing import sort_specification_strategy


class TestSortDirection:
    @pytest.mark.parametrize("token", ["asc", "ASC", " Asc "])
    def test_parses_ascending(self, token: str) -> None:
        assert SortDirection.from_token(token) is SortDirection.ASC

    def test_parses_descending(self) -> None:
        assert SortDirection.from_token("desc") is SortDirection.DESC

    def test_accepts_enum(self) -> None:
        assert SortDirection.from_token(SortDirection.DESC) is SortDirection.DESC

    @pytest.mark.parametrize("token", ["up", "", "nulls_first_op", "ascending"])
    def test_rejects_unknown_token(self, token: str) -> None:
        with pytest.raises(InvalidOrderingError):
            SortDirection.from_token(token)

    def test_reversed(self) -> None:
        assert SortDirection.ASC.reversed() is SortDirection.DESC
        assert SortDirection.DESC.reversed() is SortDirection.ASC


class TestSortSpecificationDerive:
    def test_keeps_precedence_order(self) -> None:
        spec = SortSpecification.derive([("age", "asc"), ("id", "DESC")])
        assert spec.field_names == ("age", "id")
        assert spec.direction_of("age") is SortDirection.ASC
        assert spec.direction_of("id") is SortDirection.DESC

    def test_empty_ordering_raises(self) -> None:
        with pytest.raises(InvalidOrderingError, match="ordering"):
            SortSpecification.derive([])

    def test_duplicate_field_raises(self) -> None:
        with pytest.raises(InvalidOrderingError, match="multiple times"):
            SortSpecification.derive([("id", "ASC"), ("id", "DESC")])

    def test_invalid_direction_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            SortSpecification.derive([("id", "sideways")])

    def test_direction_of_unknown_field(self) -> None:
        spec = SortSpecification.derive([("id", "ASC")])
        with pytest.raises(KeyError):
            spec.direction_of("age")

    def test_is_immutable(self) -> None:
        spec = SortSpecification.derive([("id", "ASC")])
        with pytest.raises((AttributeError, TypeError)):
            spec.fields = ()  # type: ignore[misc]

    def test_iteration_and_len(self) -> None:
        spec = SortSpecification.derive([("a", "ASC"), ("b", "DESC")])
        assert len(spec) == 2
        assert list(spec) == [SortField("a", SortDirection.ASC), SortField("b", SortDirection.DESC)]


class TestReversed:
    def test_flips_every_direction(self) -> None:
        spec = SortSpecification.derive([("age", "ASC"), ("id", "DESC")])
        flipped = spec.reversed()
        assert flipped.field_names == ("age", "id")
        assert flipped.direction_of("age") is SortDirection.DESC
        assert flipped.direction_of("id") is SortDirection.ASC

    def test_original_untouched(self) -> None:
        spec = SortSpecification.derive([("age", "ASC")])
        spec.reversed()
        assert spec.direction_of("age") is SortDirection.ASC

    @given(sort_specification_strategy())
    def test_double_reverse_is_identity(self, spec: SortSpecification) -> None:
        assert spec.reversed().reversed() == spec


class TestBoundaryDirection:
    def test_values(self) -> None:
        assert BoundaryDirection("lower") is BoundaryDirection.LOWER
        assert BoundaryDirection("upper") is BoundaryDirection.UPPER

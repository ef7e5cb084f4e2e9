"""Ordering – SortDirection, SortField, SortSpecification."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable, Iterator

from keyset_pager.kernel.errors import InvalidOrderingError


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_token(cls, token: "str | SortDirection") -> "SortDirection":
        """Parse ``asc``/``desc`` (any case); anything else is rejected."""
        if isinstance(token, SortDirection):
            return token
        try:
            return cls(str(token).strip().upper())
        except ValueError:
            raise InvalidOrderingError(
                f"Invalid sort direction {token!r}; expected 'ASC' or 'DESC'",
                detail={"direction": str(token)},
            ) from None

    def reversed(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclasses.dataclass(frozen=True, slots=True)
class SortField:
    """Single sort column."""
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class SortSpecification:
    """Ordered, validated multi-column sort descriptor.

    Fields are held in comparison precedence order. Every field appears
    exactly once and there is at least one field.
    """

    fields: tuple[SortField, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise InvalidOrderingError("The source query does not declare any ordering")
        seen: set[str] = set()
        for sort_field in self.fields:
            if sort_field.field in seen:
                raise InvalidOrderingError(
                    f"The field {sort_field.field!r} appears multiple times in the ordering",
                    detail={"field": sort_field.field},
                )
            seen.add(sort_field.field)

    @classmethod
    def derive(
        cls, source: Iterable[tuple[str, "str | SortDirection"]]
    ) -> "SortSpecification":
        """Build a specification from raw ``(field, direction)`` pairs.

        Raises :class:`InvalidOrderingError` (a ``ConfigurationError``) when the
        source is empty, repeats a field, or uses an unknown direction token.
        """
        return cls(
            tuple(SortField(field, SortDirection.from_token(direction)) for field, direction in source)
        )

    def reversed(self) -> "SortSpecification":
        """Return a copy with every direction flipped and field order kept."""
        return SortSpecification(
            tuple(SortField(f.field, f.direction.reversed()) for f in self.fields)
        )

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.field for f in self.fields)

    def direction_of(self, field: str) -> SortDirection:
        for sort_field in self.fields:
            if sort_field.field == field:
                return sort_field.direction
        raise KeyError(field)

    def __iter__(self) -> Iterator[SortField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


__all__ = ["SortDirection", "SortField", "SortSpecification"]

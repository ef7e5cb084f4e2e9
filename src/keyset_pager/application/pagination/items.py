"""Application pagination – KeysetItem and IndexResolver."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Mapping, TypeVar

from keyset_pager.kernel.errors import ConfigurationError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class KeysetItem(Generic[T]):
    """One result row together with the position it occupies in the ordering.

    ``boundary`` maps every sort field to this row's value, in sort
    precedence order, and can be passed back as the next boundary.
    """

    key: Any
    value: T
    boundary: Mapping[str, Any]

    @property
    def boundary_values(self) -> tuple[Any, ...]:
        return tuple(self.boundary.values())


class IndexResolver:
    """Derive an item key from a payload row."""

    @staticmethod
    def resolve(row: Any, index_by: str) -> Any:
        if isinstance(row, Mapping):
            try:
                return row[index_by]
            except KeyError:
                raise ConfigurationError(
                    f"Cannot index rows by {index_by!r}: key not present in row",
                    detail={"index_by": index_by},
                ) from None
        try:
            return getattr(row, index_by)
        except AttributeError:
            raise ConfigurationError(
                f"Cannot index rows by {index_by!r}: "
                f"{type(row).__name__} has no such attribute",
                detail={"index_by": index_by, "row_type": type(row).__name__},
            ) from None


__all__ = ["IndexResolver", "KeysetItem"]

"""Application pagination – OffsetPage, KeysetPage."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Mapping, TypeVar

from keyset_pager.application.pagination.items import KeysetItem
from keyset_pager.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass
class OffsetPage(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "OffsetPage[Any]":
        """Return a new :class:`OffsetPage` with each item transformed by *fn*."""
        return OffsetPage(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> "OffsetPage[T]":
        return cls(items=items, total=total, page=request.page, size=request.size)


@dataclasses.dataclass(frozen=True)
class KeysetPage(Generic[T]):
    """Keyset page: items in forward order plus an optional total."""

    items: list[KeysetItem[T]]
    total: int | None = None

    @property
    def first_boundary(self) -> Mapping[str, Any] | None:
        """Boundary to pass with ``UPPER`` to fetch the page before this one."""
        return self.items[0].boundary if self.items else None

    @property
    def last_boundary(self) -> Mapping[str, Any] | None:
        """Boundary to pass with ``LOWER`` to fetch the page after this one."""
        return self.items[-1].boundary if self.items else None

    @property
    def values(self) -> list[T]:
        return [item.value for item in self.items]

    def __len__(self) -> int:
        return len(self.items)


__all__ = ["KeysetPage", "OffsetPage"]

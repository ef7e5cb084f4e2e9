"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from keyset_pager.kernel.errors import ConfigurationError


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (1-based page number)."""
    page: int = 1
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ConfigurationError("page must be >= 1")
        if self.size < 1:
            raise ConfigurationError("size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


__all__ = ["PageRequest"]

"""Root of the keyset-pager error hierarchy.

Every error carries a machine-readable ``code`` and a flat ``detail`` mapping
naming the offending input (fields, offsets, operators, settings). Boundary
values and secrets are kept out of ``detail`` so errors are safe to log.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Flat mapping describing the offending input.
        cause: Backend or library exception that triggered this error.
    """

    default_code: str = "keyset_pager_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def with_detail(self, **extra: Any) -> "BaseError":
        """Merge *extra* into ``detail`` and return ``self`` so it can be raised inline."""
        self.detail.update(extra)
        return self

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.code}]({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used by ``__str__`` and structured log events."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.cause is not None:
            payload["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        return payload


__all__ = ["BaseError"]

"""Validation errors – structural inconsistencies in a query or a cursor."""

from __future__ import annotations

from typing import Any

from keyset_pager.kernel.errors.base import BaseError


class ValidationError(BaseError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnresolvableFieldError(ValidationError):
    """A field references an alias or column the source query does not define."""

    default_code = "unresolvable_field"

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Cannot resolve field {field!r}: {reason}",
            errors=[{"field": field, "reason": reason}],
        )
        self.field = field


class InvalidCursorError(ValidationError):
    """Raised when a cursor token cannot be decoded or has an invalid signature."""

    default_code = "invalid_cursor"


__all__ = ["InvalidCursorError", "UnresolvableFieldError", "ValidationError"]

"""Configuration errors – adapter misuse detected before any query runs."""

from __future__ import annotations

from keyset_pager.kernel.errors.base import BaseError


class ConfigurationError(BaseError):
    """The adapter, its source query or a call argument is misconfigured.

    Raised at construction or at the start of the offending call, never
    after a query has been sent to the backend.
    """

    default_code = "configuration_error"


class UnboundedSourceRequiredError(ConfigurationError):
    """The source query already carries an offset or a limit."""

    default_code = "source_already_bounded"

    def __init__(self, offset: int, limit: int | None) -> None:
        super().__init__(
            "The source query must not set an offset or a limit; "
            f"got offset={offset!r}, limit={limit!r}",
            detail={"offset": offset, "limit": limit},
        )
        self.offset = offset
        self.limit = limit


class InvalidOrderingError(ConfigurationError):
    """The declared ordering cannot be used for keyset pagination."""

    default_code = "invalid_ordering"


__all__ = ["ConfigurationError", "InvalidOrderingError", "UnboundedSourceRequiredError"]

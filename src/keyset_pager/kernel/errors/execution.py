"""Execution errors – faults reported by the query backend."""

from __future__ import annotations

import contextlib
from typing import Iterator

from keyset_pager.kernel.errors.base import BaseError


class ExecutionError(BaseError):
    """The backend failed to execute a query or to produce a definite count."""

    default_code = "execution_error"


class CountUnavailableError(ExecutionError):
    """A count was required but the backend could not determine one."""

    default_code = "count_unavailable"


@contextlib.contextmanager
def backend_faults(operation: str) -> Iterator[None]:
    """Re-raise backend exceptions as :class:`ExecutionError`.

    Errors already in this hierarchy pass through unchanged.
    """
    try:
        yield
    except BaseError:
        raise
    except Exception as exc:
        raise ExecutionError(f"{operation} failed: {exc}", cause=exc).with_detail(
            operation=operation
        ) from exc


__all__ = ["CountUnavailableError", "ExecutionError", "backend_faults"]

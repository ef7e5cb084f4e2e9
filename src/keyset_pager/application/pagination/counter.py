"""Application pagination – Counter."""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from keyset_pager.application.pagination.ports import QueryExecutor
from keyset_pager.application.pagination.query import QuerySpec
from keyset_pager.kernel.errors import CountUnavailableError, backend_faults
from keyset_pager.kernel.expressions import QueryParameter


class Counter:
    """Counts rows through the executor's count path, never by materialising them."""

    def __init__(self, executor: QueryExecutor) -> None:
        self._executor = executor

    async def count(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int | None:
        """Return the row count for *spec*, or ``None`` if it cannot be known."""
        with backend_faults("count"):
            result = await self._executor.count(
                spec, parameters, execution_options=execution_options
            )
        if result is None or result < 0:
            return None
        return int(result)

    async def require(
        self,
        spec: QuerySpec,
        parameters: Sequence[QueryParameter] = (),
        *,
        execution_options: Mapping[str, Any] | None = None,
    ) -> int:
        """Like :meth:`count` but raise :class:`CountUnavailableError` on ``None``."""
        result = await self.count(spec, parameters, execution_options=execution_options)
        if result is None:
            raise CountUnavailableError("The backend could not determine a row count")
        return result


__all__ = ["Counter"]

"""Parameter type resolution – ordered strategies returning a type hint or ``None``."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class TypeResolver(Protocol):
    """Port: suggest a binding type for *value* bound against *field*.

    Returns ``None`` when untyped binding suffices.
    """

    def resolve(self, field: str, value: Any) -> Any | None: ...


class ExplicitMapping:
    """Caller-supplied ``field -> type`` mapping."""

    def __init__(self, mapping: Mapping[str, Any] | None = None) -> None:
        self._mapping = dict(mapping or {})

    def resolve(self, field: str, value: Any) -> Any | None:  # noqa: ARG002
        return self._mapping.get(field)


class TypeResolverChain:
    """Try each strategy in order; the first non-``None`` hint wins."""

    def __init__(self, strategies: Sequence[TypeResolver]) -> None:
        self._strategies = tuple(strategies)

    def resolve(self, field: str, value: Any) -> Any | None:
        for strategy in self._strategies:
            hint = strategy.resolve(field, value)
            if hint is not None:
                return hint
        return None


__all__ = ["ExplicitMapping", "TypeResolver", "TypeResolverChain"]

"""ExpressionDispatcher – renders an expression tree for one backend."""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Mapping

from keyset_pager.kernel.errors import ConfigurationError
from keyset_pager.kernel.expressions.binding import TypeResolver
from keyset_pager.kernel.expressions.nodes import Expression, Operator


@dataclasses.dataclass(frozen=True, slots=True)
class QueryParameter:
    """One bound literal: placeholder name, value and optional backend type."""
    name: str
    value: Any
    type: Any = None


@dataclasses.dataclass(frozen=True)
class RenderedPredicate:
    """Backend-native predicate plus the parameters it references."""

    predicate: Any
    parameters: tuple[QueryParameter, ...] = ()

    def values(self) -> dict[str, Any]:
        return {p.name: p.value for p in self.parameters}


Bind = Callable[[str, Any], QueryParameter]


class ExpressionDispatcher(abc.ABC):
    """Translate :mod:`~keyset_pager.kernel.expressions.nodes` trees.

    Subclasses implement :meth:`translate`, a total recursive function over
    the three node kinds. Every ``Comparison`` must call *bind* exactly once,
    so each occurrence of a value gets its own parameter even when the same
    field/value pair shows up in several branches.
    """

    def __init__(
        self,
        *,
        parameter_prefix: str = "keyset",
        type_resolver: TypeResolver | None = None,
    ) -> None:
        self._parameter_prefix = parameter_prefix
        self._type_resolver = type_resolver

    def render(self, expression: Expression) -> RenderedPredicate:
        parameters: list[QueryParameter] = []

        def bind(field: str, value: Any) -> QueryParameter:
            parameter = QueryParameter(
                name=f"{self._parameter_prefix}_{len(parameters) + 1}",
                value=value,
                type=self._resolve_type(field, value),
            )
            parameters.append(parameter)
            return parameter

        predicate = self.translate(expression, bind)
        return RenderedPredicate(predicate, tuple(parameters))

    @abc.abstractmethod
    def translate(self, node: Expression, bind: Bind) -> Any: ...

    def _resolve_type(self, field: str, value: Any) -> Any | None:
        if self._type_resolver is None:
            return None
        return self._type_resolver.resolve(field, value)

    @staticmethod
    def lookup_operator(operator: Operator, table: Mapping[Operator, Any]) -> Any:
        """Return the backend's implementation of *operator* or fail loudly."""
        try:
            return table[operator]
        except KeyError:
            raise ConfigurationError(
                f"Operator {operator.value!r} is not supported by this backend",
                detail={"operator": operator.value},
            ) from None

    @staticmethod
    def unsupported(node: Any) -> ConfigurationError:
        return ConfigurationError(
            f"Unsupported expression node {type(node).__name__}",
            detail={"node": type(node).__name__},
        )


__all__ = ["Bind", "ExpressionDispatcher", "QueryParameter", "RenderedPredicate"]

"""In-memory adapter – InMemoryExpressionDispatcher."""
from __future__ import annotations

import operator
from typing import Any

from keyset_pager.adapters.memory.predicates import AllOf, AnyOf, FieldComparison, RowPredicate
from keyset_pager.kernel.expressions import (
    And,
    Bind,
    Comparison,
    Expression,
    ExpressionDispatcher,
    Operator,
    Or,
)

_OPERATORS: dict[Operator, Any] = {
    Operator.LT: operator.lt,
    Operator.GT: operator.gt,
    Operator.LE: operator.le,
    Operator.GE: operator.ge,
    Operator.EQ: operator.eq,
}


class InMemoryExpressionDispatcher(ExpressionDispatcher):
    """Renders expressions into :class:`RowPredicate` trees."""

    def translate(self, node: Expression, bind: Bind) -> RowPredicate:
        if isinstance(node, Comparison):
            compare = self.lookup_operator(node.operator, _OPERATORS)
            parameter = bind(node.field, node.value)
            return FieldComparison(node.field, compare, parameter.name)
        if isinstance(node, And):
            return AllOf(tuple(self.translate(child, bind) for child in node.children))
        if isinstance(node, Or):
            return AnyOf(tuple(self.translate(child, bind) for child in node.children))
        raise self.unsupported(node)


__all__ = ["InMemoryExpressionDispatcher"]

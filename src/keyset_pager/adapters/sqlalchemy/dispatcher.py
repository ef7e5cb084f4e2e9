"""SQLAlchemy adapter – SqlAlchemyExpressionDispatcher."""
from __future__ import annotations

import operator
from typing import Any, Mapping

from sqlalchemy import and_, bindparam, or_
from sqlalchemy.sql.elements import ColumnElement

from keyset_pager.kernel.errors import UnresolvableFieldError
from keyset_pager.kernel.expressions import (
    And,
    Bind,
    Comparison,
    Expression,
    ExpressionDispatcher,
    Operator,
    Or,
    TypeResolver,
)

_OPERATORS: dict[Operator, Any] = {
    Operator.LT: operator.lt,
    Operator.GT: operator.gt,
    Operator.LE: operator.le,
    Operator.GE: operator.ge,
    Operator.EQ: operator.eq,
}


class SqlAlchemyExpressionDispatcher(ExpressionDispatcher):
    """Renders expressions into SQLAlchemy boolean clauses.

    Each comparison becomes ``column <op> :name`` with a value-less
    ``bindparam``; values travel separately as the rendered parameters.
    """

    def __init__(
        self,
        columns: Mapping[str, ColumnElement[Any]],
        *,
        parameter_prefix: str = "keyset",
        type_resolver: TypeResolver | None = None,
    ) -> None:
        super().__init__(parameter_prefix=parameter_prefix, type_resolver=type_resolver)
        self._columns = columns

    def translate(self, node: Expression, bind: Bind) -> ColumnElement[bool]:
        if isinstance(node, Comparison):
            compare = self.lookup_operator(node.operator, _OPERATORS)
            column = self._column(node.field)
            parameter = bind(node.field, node.value)
            return compare(column, bindparam(parameter.name, type_=parameter.type))
        if isinstance(node, And):
            return and_(*(self.translate(child, bind) for child in node.children))
        if isinstance(node, Or):
            return or_(*(self.translate(child, bind) for child in node.children))
        raise self.unsupported(node)

    def _column(self, field: str) -> ColumnElement[Any]:
        try:
            return self._columns[field]
        except KeyError:
            raise UnresolvableFieldError(field, "not an ordered column of the query") from None


__all__ = ["SqlAlchemyExpressionDispatcher"]

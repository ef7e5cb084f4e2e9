"""Kernel expressions – keyset predicate tree, calculator and dispatcher contract."""
from keyset_pager.kernel.expressions.binding import ExplicitMapping, TypeResolver, TypeResolverChain
from keyset_pager.kernel.expressions.calculator import KeysetExpressionCalculator
from keyset_pager.kernel.expressions.dispatcher import (
    Bind,
    ExpressionDispatcher,
    QueryParameter,
    RenderedPredicate,
)
from keyset_pager.kernel.expressions.nodes import And, Comparison, Expression, Operator, Or

__all__ = [
    "And",
    "Bind",
    "Comparison",
    "ExplicitMapping",
    "Expression",
    "ExpressionDispatcher",
    "KeysetExpressionCalculator",
    "Operator",
    "Or",
    "QueryParameter",
    "RenderedPredicate",
    "TypeResolver",
    "TypeResolverChain",
]

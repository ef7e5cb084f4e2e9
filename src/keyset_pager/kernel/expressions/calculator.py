"""KeysetExpressionCalculator – boundary tuple to "strictly after" predicate."""
from __future__ import annotations

from keyset_pager.kernel.errors import ConfigurationError
from keyset_pager.kernel.expressions.nodes import And, Comparison, Expression, Operator, Or
from keyset_pager.kernel.ordering import Boundary, SortDirection, SortSpecification


class KeysetExpressionCalculator:
    """Builds the lexicographic keyset predicate for an ordering and a boundary.

    For sort columns ``c1..cn`` and boundary values ``v1..vn`` the result is::

        (c1 > v1)
        OR (c1 = v1 AND c2 > v2)
        ...
        OR (c1 = v1 AND ... AND c(n-1) = v(n-1) AND cn > vn)

    where ``>`` becomes ``<`` for descending columns. A row satisfies the
    predicate iff it sorts strictly after the boundary. A missing or empty
    boundary means "from the start" and yields no predicate.
    """

    @staticmethod
    def calculate(
        ordering: SortSpecification,
        boundary: Boundary | None,
    ) -> Expression | None:
        if not boundary:
            return None

        KeysetExpressionCalculator._check_boundary(ordering, boundary)

        branches: list[Expression] = []
        equalities: list[Comparison] = []
        for sort_field in ordering:
            value = boundary[sort_field.field]
            strict = Operator.GT if sort_field.direction is SortDirection.ASC else Operator.LT
            comparison = Comparison(sort_field.field, strict, value)
            if equalities:
                branches.append(And((*equalities, comparison)))
            else:
                branches.append(comparison)
            equalities.append(Comparison(sort_field.field, Operator.EQ, value))

        if len(branches) == 1:
            return branches[0]
        return Or(tuple(branches))

    @staticmethod
    def _check_boundary(ordering: SortSpecification, boundary: Boundary) -> None:
        expected = set(ordering.field_names)
        unknown = sorted(set(boundary) - expected)
        if unknown:
            raise ConfigurationError(
                f"Boundary references fields outside the ordering: {', '.join(unknown)}",
                detail={"unknown_fields": unknown},
            )
        missing = [name for name in ordering.field_names if name not in boundary]
        if missing:
            raise ConfigurationError(
                f"Boundary is missing values for: {', '.join(missing)}",
                detail={"missing_fields": missing},
            )


__all__ = ["KeysetExpressionCalculator"]

"""In-memory row predicates – composable boolean rules over mapping/object rows."""

from __future__ import annotations

import abc
from typing import Any, Callable, Mapping

from keyset_pager.kernel.errors import UnresolvableFieldError


def read_field(row: Any, field: str) -> Any:
    """Read *field* from a mapping row or an attribute of an object row."""
    if isinstance(row, Mapping):
        try:
            return row[field]
        except KeyError:
            raise UnresolvableFieldError(field, "key not present in row") from None
    try:
        return getattr(row, field)
    except AttributeError:
        raise UnresolvableFieldError(
            field, f"{type(row).__name__} has no such attribute"
        ) from None


class RowPredicate(abc.ABC):
    """Abstract base for row predicates – provides operator overloads.

    Predicates reference bound parameters by name; the values are supplied at
    evaluation time.

    Example::

        adults = FieldComparison("age", operator.ge, "p1")
        adults.is_satisfied_by({"age": 30}, {"p1": 18})
    """

    @abc.abstractmethod
    def is_satisfied_by(self, row: Any, parameters: Mapping[str, Any]) -> bool: ...

    def __and__(self, other: "RowPredicate") -> "AllOf":
        return AllOf((self, other))

    def __or__(self, other: "RowPredicate") -> "AnyOf":
        return AnyOf((self, other))


class FieldComparison(RowPredicate):
    """``compare(row.field, parameters[parameter])``."""

    def __init__(self, field: str, compare: Callable[[Any, Any], bool], parameter: str) -> None:
        self.field = field
        self.compare = compare
        self.parameter = parameter

    def is_satisfied_by(self, row: Any, parameters: Mapping[str, Any]) -> bool:
        return bool(self.compare(read_field(row, self.field), parameters[self.parameter]))

    def __repr__(self) -> str:  # pragma: no cover
        return f"FieldComparison({self.field!r}, {self.compare.__name__}, {self.parameter!r})"


class AllOf(RowPredicate):
    """Conjunction of predicates."""

    def __init__(self, children: tuple[RowPredicate, ...]) -> None:
        self.children = children

    def is_satisfied_by(self, row: Any, parameters: Mapping[str, Any]) -> bool:
        return all(child.is_satisfied_by(row, parameters) for child in self.children)


class AnyOf(RowPredicate):
    """Disjunction of predicates."""

    def __init__(self, children: tuple[RowPredicate, ...]) -> None:
        self.children = children

    def is_satisfied_by(self, row: Any, parameters: Mapping[str, Any]) -> bool:
        return any(child.is_satisfied_by(row, parameters) for child in self.children)


__all__ = ["AllOf", "AnyOf", "FieldComparison", "RowPredicate", "read_field"]

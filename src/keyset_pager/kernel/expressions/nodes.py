"""Keyset expression tree – Comparison, And, Or.

The tree is a closed union of three node kinds. Nodes are immutable and are
built fresh for every request.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Union


class Operator(str, Enum):
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    EQ = "="


@dataclasses.dataclass(frozen=True, slots=True)
class Comparison:
    """``field <operator> value``."""
    field: str
    operator: Operator
    value: Any

    def __str__(self) -> str:
        return f"{self.field} {self.operator.value} {self.value!r}"


@dataclasses.dataclass(frozen=True, slots=True)
class And:
    """Conjunction of child expressions."""
    children: tuple["Expression", ...]

    def __str__(self) -> str:
        return "(" + " AND ".join(str(c) for c in self.children) + ")"


@dataclasses.dataclass(frozen=True, slots=True)
class Or:
    """Disjunction of child expressions."""
    children: tuple["Expression", ...]

    def __str__(self) -> str:
        return "(" + " OR ".join(str(c) for c in self.children) + ")"


Expression = Union[Comparison, And, Or]


__all__ = ["And", "Comparison", "Expression", "Operator", "Or"]

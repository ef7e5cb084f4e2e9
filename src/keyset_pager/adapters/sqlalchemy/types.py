"""SQLAlchemy adapter – bind parameter type strategies."""
from __future__ import annotations

import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy import Date, DateTime, Numeric, Time, Uuid
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.types import NullType, TypeEngine

from keyset_pager.kernel.errors import UnresolvableFieldError
from keyset_pager.kernel.expressions import ExplicitMapping, TypeResolverChain


class SchemaLookup:
    """Use the SQL type of the ordered column itself."""

    def __init__(self, columns: Mapping[str, ColumnElement[Any]]) -> None:
        self._columns = columns

    def resolve(self, field: str, value: Any) -> TypeEngine[Any] | None:  # noqa: ARG002
        column = self._columns.get(field)
        if column is None:
            raise UnresolvableFieldError(field, "not an ordered column of the query")
        if isinstance(column.type, NullType):
            return None
        return column.type


class ShapeHeuristic:
    """Guess a type from the Python value for untyped expressions."""

    def resolve(self, field: str, value: Any) -> TypeEngine[Any] | None:  # noqa: ARG002
        if isinstance(value, datetime):
            return DateTime(timezone=value.tzinfo is not None)
        if isinstance(value, date):
            return Date()
        if isinstance(value, time):
            return Time(timezone=value.tzinfo is not None)
        if isinstance(value, uuid.UUID):
            return Uuid()
        if isinstance(value, Decimal):
            return Numeric()
        return None


def default_type_resolver(
    columns: Mapping[str, ColumnElement[Any]],
    type_mapping: Mapping[str, Any] | None = None,
) -> TypeResolverChain:
    """Explicit mapping first, then column metadata, then value heuristics."""
    return TypeResolverChain(
        [ExplicitMapping(type_mapping), SchemaLookup(columns), ShapeHeuristic()]
    )


__all__ = ["SchemaLookup", "ShapeHeuristic", "default_type_resolver"]

"""SQLAlchemy adapter – read the declared ORDER BY of a ``Select``."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Select
from sqlalchemy.sql import operators
from sqlalchemy.sql.elements import (
    ColumnClause,
    ColumnElement,
    Label,
    UnaryExpression,
    _label_reference,
)
from sqlalchemy.sql.util import find_tables

from keyset_pager.kernel.errors import UnresolvableFieldError


def _direction_token(modifier: Any) -> str:
    if modifier is operators.asc_op:
        return "ASC"
    if modifier is operators.desc_op:
        return "DESC"
    # nulls_first / nulls_last and friends; rejected by SortDirection.from_token
    return getattr(modifier, "__name__", str(modifier))


def _source_names(statement: Select) -> set[str]:
    names: set[str] = set()
    for from_ in statement.get_final_froms():
        for table in find_tables(from_, include_aliases=True):
            name = getattr(table, "name", None)
            if name:
                names.add(name)
    return names


def _resolve(statement: Select, element: Any, sources: set[str]) -> tuple[str, ColumnElement[Any]]:
    if isinstance(element, Label):
        return element.name, element.element

    if isinstance(element, ColumnClause):
        table = element.table
        if table is None:
            return element.name, element
        alias = getattr(table, "name", None)
        field = f"{alias}.{element.name}"
        if alias not in sources:
            raise UnresolvableFieldError(
                field, f"alias {alias!r} is not a FROM source of the query"
            )
        return field, element

    inner = getattr(element, "element", None)
    # order_by("name") refers to a selected column by its string name
    if isinstance(inner, str):
        try:
            return inner, statement.selected_columns[inner]
        except KeyError:
            raise UnresolvableFieldError(inner, "no such selected column") from None
    if isinstance(inner, ColumnElement):
        return _resolve(statement, inner, sources)

    raise UnresolvableFieldError(
        str(element), f"unsupported ORDER BY element {type(element).__name__}"
    )


def extract_ordering(
    statement: Select,
) -> tuple[list[tuple[str, str]], dict[str, ColumnElement[Any]]]:
    """Return ``([(field, direction_token), ...], {field: column})``.

    Bare columns sort ascending. Fields are named ``alias.column`` for table
    columns and by their label otherwise.
    """
    sources = _source_names(statement)
    ordering: list[tuple[str, str]] = []
    columns: dict[str, ColumnElement[Any]] = {}

    for clause in statement._order_by_clauses:
        # ordering by a selected label wraps the clause in a label reference
        if isinstance(clause, _label_reference):
            clause = clause.element
        direction = "ASC"
        element: Any = clause
        if isinstance(clause, UnaryExpression) and clause.modifier is not None:
            direction = _direction_token(clause.modifier)
            element = clause.element

        field, column = _resolve(statement, element, sources)
        ordering.append((field, direction))
        columns.setdefault(field, column)

    return ordering, columns


__all__ = ["extract_ordering"]

"""
SQLAlchemy QueryBuilder.

``SelectQuery`` adapts a SQLAlchemy ``Select`` to the QueryBuilder
protocol. Column names produced by a ColumnMapper are resolved against
the column collection of the source table (or mapped class), so only
real columns can ever reach the statement; values are always bound
parameters.

Usage::

    query = SelectQuery.for_source(users_table)
    stmt = modifier(query).statement
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import FromClause, Select, asc, desc, inspect, select

from .query import SortDirection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement
    from sqlalchemy.sql.base import ReadOnlyColumnCollection


def _column_collection(source: Any) -> ReadOnlyColumnCollection[str, Any]:
    if isinstance(source, FromClause):
        return source.c
    return inspect(source).local_table.c


class SelectQuery:
    """Immutable wrapper: every method returns a new ``SelectQuery``."""

    __slots__ = ("_columns", "_source", "statement")

    def __init__(self, statement: Select[Any], source: Any) -> None:
        self.statement = statement
        self._source = source
        self._columns = _column_collection(source)

    @classmethod
    def for_source(cls, source: Any) -> SelectQuery:
        """Start from ``SELECT * FROM source``."""
        return cls(select(source), source)

    def column(self, name: str) -> ColumnElement[Any]:
        """Resolve a storage column name; raises ``KeyError`` if unknown."""
        return self._columns[name]

    def _with(self, statement: Select[Any]) -> SelectQuery:
        return SelectQuery(statement, self._source)

    # -- QueryBuilder -----------------------------------------------------

    def offset(self, offset: int) -> SelectQuery:
        return self._with(self.statement.offset(offset))

    def limit(self, limit: int) -> SelectQuery:
        return self._with(self.statement.limit(limit))

    def order_by(self, column: str, direction: SortDirection) -> SelectQuery:
        order = desc if SortDirection(direction) is SortDirection.DESC else asc
        return self._with(self.statement.order_by(order(self.column(column))))

    def where_equal(self, column: str, value: Any) -> SelectQuery:
        return self._with(self.statement.where(self.column(column) == value))

    def where_in(self, column: str, values: Sequence[Any]) -> SelectQuery:
        return self._with(self.statement.where(self.column(column).in_(list(values))))

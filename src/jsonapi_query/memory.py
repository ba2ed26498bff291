"""
In-memory QueryBuilder.

``InMemoryQuery`` records every clause a modifier appends and can run them
against plain rows (mappings). It is the reference backend for tests and
for prototyping resources without a database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from .query import SortDirection

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Predicate:
    """A recorded ``column = value`` or ``column IN (values)`` clause."""

    column: str
    operator: str
    value: Any

    def matches(self, row: Mapping[str, Any]) -> bool:
        field_value = row.get(self.column)
        if self.operator == "in":
            return field_value in self.value
        return bool(field_value == self.value)

    def __str__(self) -> str:
        if self.operator == "in":
            return f"{self.column} IN ({', '.join(str(v) for v in self.value)})"
        return f"{self.column} = {self.value}"


@dataclass
class InMemoryQuery:
    """Mutable query that applies clauses in place and returns itself."""

    offset_value: int | None = None
    limit_value: int | None = None
    orders: list[tuple[str, SortDirection]] = field(default_factory=list)
    predicates: list[Predicate] = field(default_factory=list)

    # -- QueryBuilder -----------------------------------------------------

    def offset(self, offset: int) -> InMemoryQuery:
        self.offset_value = offset
        return self

    def limit(self, limit: int) -> InMemoryQuery:
        self.limit_value = limit
        return self

    def order_by(self, column: str, direction: SortDirection) -> InMemoryQuery:
        self.orders.append((column, SortDirection(direction)))
        return self

    def where_equal(self, column: str, value: Any) -> InMemoryQuery:
        self.predicates.append(Predicate(column, "eq", value))
        return self

    def where_in(self, column: str, values: Sequence[Any]) -> InMemoryQuery:
        self.predicates.append(Predicate(column, "in", tuple(values)))
        return self

    # -- Inspection -------------------------------------------------------

    @property
    def order_clauses(self) -> list[str]:
        """Orders rendered as ``"column DIRECTION"``."""
        return [f"{column} {direction.value}" for column, direction in self.orders]

    @property
    def where_clauses(self) -> list[str]:
        return [str(p) for p in self.predicates]

    # -- Execution --------------------------------------------------------

    def execute(self, rows: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
        """Filter, order and slice *rows* the way a SQL backend would."""
        result = [row for row in rows if all(p.matches(row) for p in self.predicates)]
        if self.orders:
            result.sort(key=cmp_to_key(self._compare))
        start = self.offset_value or 0
        stop = start + self.limit_value if self.limit_value is not None else None
        logger.debug(
            "Executed in-memory query: %d predicates, %d orders, slice [%s:%s]",
            len(self.predicates),
            len(self.orders),
            start,
            stop,
        )
        return result[start:stop]

    def _compare(self, left: Mapping[str, Any], right: Mapping[str, Any]) -> int:
        for column, direction in self.orders:
            a, b = left.get(column), right.get(column)
            if a == b:
                continue
            # NULLs sort last in both directions
            if a is None:
                return 1
            if b is None:
                return -1
            result = -1 if a < b else 1
            return result if direction is SortDirection.ASC else -result
        return 0

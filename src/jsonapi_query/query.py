"""
QueryBuilder protocol and composable QueryModifier values.

A ``QueryModifier`` is a deferred mutation: a callable taking a query
object and returning the (possibly new) query object. Modifiers capture
only parsed, immutable data and compose by sequential application.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple, Protocol, TypeVar, runtime_checkable

from .exceptions import QueryParamError

Q = TypeVar("Q", bound="QueryBuilder")


class SortDirection(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def _missing_(cls, value: object) -> SortDirection | None:
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


@runtime_checkable
class QueryBuilder(Protocol):
    """Backend query object a modifier is applied to.

    Implementations: InMemoryQuery, SelectQuery (SQLAlchemy).
    Every method returns the query to continue with, which may be ``self``
    for mutable builders or a copy for generative ones.
    """

    def offset(self, offset: int) -> Any: ...

    def limit(self, limit: int) -> Any: ...

    def order_by(self, column: str, direction: SortDirection) -> Any: ...

    def where_equal(self, column: str, value: Any) -> Any: ...

    def where_in(self, column: str, values: Sequence[Any]) -> Any: ...


QueryModifier = Callable[[Any], Any]


def noop(query: Q) -> Q:
    """Modifier that leaves the query untouched."""
    return query


def chain(*modifiers: QueryModifier) -> QueryModifier:
    """Compose *modifiers* into one, applied left to right."""
    steps = tuple(modifiers)

    def apply(query: Any) -> Any:
        for step in steps:
            query = step(query)
        return query

    return apply


class ParseResult(NamedTuple):
    """A parser's modifier together with its (optional) error.

    The modifier is ``None`` only when the parser could not produce one at
    all (pagination failures). Sorting and filtering always return a
    modifier for their valid entries, even alongside an error.
    """

    modifier: QueryModifier | None
    error: QueryParamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> QueryModifier:
        """Return the modifier, raising the error if there is one."""
        if self.error is not None:
            raise self.error
        return self.modifier if self.modifier is not None else noop

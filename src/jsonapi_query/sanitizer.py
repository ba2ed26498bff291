"""
ValueSanitizer — validate and cast raw filter values per column.

A sanitizer receives the mapped column name and one raw string token and
returns the typed value to bind into a predicate. Rejection is signalled
by raising ``ValueError``; ``SanitizationError`` and pydantic's
``ValidationError`` both qualify.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import SanitizationError

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class ValueSanitizer(Protocol):
    """Turn a raw query-string value into a safe, typed value."""

    def sanitize(self, column: str, value: str) -> Any:
        """Return the typed value or raise ``ValueError``."""
        ...


class IdentitySanitizer:
    """Accept every value unchanged."""

    def sanitize(self, column: str, value: str) -> Any:
        return value


class TypedSanitizer:
    """Cast values with one pydantic ``TypeAdapter`` per column.

    Usage::

        sanitizer = TypedSanitizer({"col_age": int, "col_created": datetime})
        sanitizer.sanitize("col_age", "42")  # -> 42

    Columns without a declared type are rejected unless *default* is given.
    """

    def __init__(
        self,
        column_types: Mapping[str, Any],
        *,
        default: Any | None = None,
        strip: bool = True,
    ) -> None:
        self._adapters: dict[str, TypeAdapter[Any]] = {
            column: TypeAdapter(tp) for column, tp in column_types.items()
        }
        self._default = TypeAdapter(default) if default is not None else None
        self._strip = strip

    def sanitize(self, column: str, value: str) -> Any:
        adapter = self._adapters.get(column, self._default)
        if adapter is None:
            raise SanitizationError(column, value, "column has no declared type")
        raw = value.strip() if self._strip else value
        try:
            return adapter.validate_strings(raw)
        except PydanticValidationError as e:
            errors = e.errors()
            reason = errors[0]["msg"] if errors else str(e)
            raise SanitizationError(column, value, reason) from e

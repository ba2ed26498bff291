"""
JSON:API query parameter exception hierarchy.

All exceptions inherit from ``JsonApiQueryError``. Request-input failures
derive from ``QueryParamError`` and provide ``to_dict()`` so the API layer
can turn them into a 4xx response body.
"""

from __future__ import annotations

from typing import Any


class JsonApiQueryError(Exception):
    """Root exception for the jsonapi-query package."""


class ConfigurationError(JsonApiQueryError):
    """Raised when the page size configuration cannot be loaded."""


class SanitizationError(JsonApiQueryError, ValueError):
    """Raised by a value sanitizer when a raw value is rejected."""

    def __init__(self, column: str, value: str, reason: str | None = None) -> None:
        self.column = column
        self.value = value
        self.reason = reason
        message = f"Invalid value {value!r} for column {column!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class QueryParamError(JsonApiQueryError, ValueError):
    """Raised when a query parameter is malformed or not allowed.

    Carries structured errors: ``{parameter: [messages]}``.
    """

    parameter: str = "__root__"

    def __init__(self, message: str) -> None:
        self.message = message
        self.errors: dict[str, list[str]] = {self.parameter: [message]}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "parameter": self.parameter,
        }


# ── Pagination ───────────────────────────────────────────────────────


class PaginationError(QueryParamError):
    """Base class for ``page[...]`` failures."""

    parameter = "page"


class PaginationParseError(PaginationError):
    """``page[number]`` or ``page[size]`` is not a usable integer."""

    def __init__(self, key: str, value: str, reason: str = "not a valid integer") -> None:
        self.key = key
        self.value = value
        super().__init__(f"{key} {reason}: {value!r}")


class PageSizeOutOfBoundsError(PaginationError):
    """``page[size]`` is outside the configured bounds."""

    def __init__(self, size: int, min_size: int, max_size: int) -> None:
        self.size = size
        self.min_size = min_size
        self.max_size = max_size
        super().__init__(
            "invalid page size not between min. and max. value, "
            f"min: {min_size}, max: {max_size}"
        )


# ── Sorting / filtering ──────────────────────────────────────────────


class _InvalidFieldsError(QueryParamError):
    """Aggregated error naming every rejected field."""

    kind: str = ""

    def __init__(self, fields: list[str] | tuple[str, ...]) -> None:
        self.fields: tuple[str, ...] = tuple(fields)
        joined = ",".join(self.fields)
        super().__init__(f'at least one {self.kind} parameter is not valid: "{joined}"')

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["fields"] = list(self.fields)
        return data


class InvalidSortError(_InvalidFieldsError):
    """One or more ``sort`` fields are not mapped to a column."""

    parameter = "sort"
    kind = "sorting"


class InvalidFilterError(_InvalidFieldsError):
    """One or more ``filter[...]`` fields are unmapped or carry bad values."""

    parameter = "filter"
    kind = "filter"

"""
Filtering — ``filter[<field>]=v1,v2`` -> equality / membership predicates.

``filter[color]=red`` becomes ``col_color = red`` and
``filter[color]=red,blue`` becomes ``col_color IN (red, blue)``. The field
is translated with a ColumnMapper and every value token goes through a
ValueSanitizer. A key with any rejected token is dropped as a whole.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidFilterError
from .params import normalize_query_params
from .query import ParseResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .mapping import ColumnMapper
    from .sanitizer import ValueSanitizer

logger = logging.getLogger(__name__)

FILTER_PREFIX = "filter["
FILTER_SUFFIX = "]"

ParsedFilter = dict[str, tuple[Any, ...]]


def filter_field(param_name: str) -> str | None:
    """Return ``<field>`` for ``filter[<field>]``, else ``None``."""
    if param_name.startswith(FILTER_PREFIX) and param_name.endswith(FILTER_SUFFIX):
        return param_name[len(FILTER_PREFIX) : -len(FILTER_SUFFIX)]
    return None


def sanitize_values(
    column: str, raw_values: Iterable[str], sanitizer: ValueSanitizer
) -> list[Any] | None:
    """Sanitize every comma-separated token, or ``None`` if any is rejected."""
    values: list[Any] = []
    for raw in raw_values:
        for token in raw.split(","):
            try:
                values.append(sanitizer.sanitize(column, token))
            except (ValueError, TypeError) as e:
                logger.debug("Rejected filter value %r for %s: %s", token, column, e)
                return None
    return values


def parse_filters(
    query_params: Any, mapper: ColumnMapper, sanitizer: ValueSanitizer
) -> tuple[ParsedFilter, list[str]]:
    """Collect sanitized filter values per column and rejected field names."""
    params = normalize_query_params(query_params)
    collected: dict[str, list[Any]] = {}
    invalid: list[str] = []
    for name, raw_values in params.items():
        field = filter_field(name)
        if field is None:
            continue
        column = mapper.map(field)
        if column is None:
            invalid.append(field)
            continue
        values = sanitize_values(column, raw_values, sanitizer)
        if values is None:
            invalid.append(field)
            continue
        collected.setdefault(column, []).extend(values)
    return {column: tuple(values) for column, values in collected.items()}, invalid


def filtering_from_params(
    query_params: Any, mapper: ColumnMapper, sanitizer: ValueSanitizer
) -> ParseResult:
    """Build a modifier appending one predicate per valid filter key.

    The modifier always covers the valid keys; an ``InvalidFilterError``
    naming every rejected field accompanies it when needed.
    """
    parsed, invalid = parse_filters(query_params, mapper, sanitizer)

    def apply_filtering(query: Any) -> Any:
        for column, values in parsed.items():
            if not values:
                continue
            if len(values) == 1:
                query = query.where_equal(column, values[0])
            else:
                query = query.where_in(column, values)
        return query

    if invalid:
        logger.debug("Rejected filter fields: %s", invalid)
        return ParseResult(apply_filtering, InvalidFilterError(invalid))
    return ParseResult(apply_filtering)

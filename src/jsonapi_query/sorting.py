"""Sorting — ``sort=-name,age`` -> ordered ORDER BY modifier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import InvalidSortError
from .params import first_value, normalize_query_params
from .query import ParseResult, SortDirection, noop

if TYPE_CHECKING:
    from .mapping import ColumnMapper

logger = logging.getLogger(__name__)

SORT_KEY = "sort"


class SortEntry(NamedTuple):
    column: str
    direction: SortDirection


ParsedSort = tuple[SortEntry, ...]


def parse_sort(raw: str, mapper: ColumnMapper) -> tuple[ParsedSort, list[str]]:
    """Split *raw* into mapped sort entries and rejected field names.

    Both lists keep the order in which fields appear in *raw*.
    """
    entries: list[SortEntry] = []
    invalid: list[str] = []
    for token in raw.split(","):
        if not token:
            continue
        direction = SortDirection.ASC
        if token.startswith("-"):
            direction = SortDirection.DESC
            token = token[1:]
        column = mapper.map(token)
        if column is None:
            invalid.append(token)
            continue
        entries.append(SortEntry(column, direction))
    return tuple(entries), invalid


def sorting_from_params(query_params: Any, mapper: ColumnMapper) -> ParseResult:
    """Build a modifier appending one order clause per valid sort field.

    The modifier is returned even when some fields were rejected; the
    accompanying ``InvalidSortError`` names every rejected field.
    """
    params = normalize_query_params(query_params)
    raw = first_value(params, SORT_KEY)
    if not raw:
        return ParseResult(noop)

    entries, invalid = parse_sort(raw, mapper)

    def apply_sorting(query: Any) -> Any:
        for entry in entries:
            query = query.order_by(entry.column, entry.direction)
        return query

    if invalid:
        logger.debug("Rejected sort fields: %s", invalid)
        return ParseResult(apply_sorting, InvalidSortError(invalid))
    return ParseResult(apply_sorting)

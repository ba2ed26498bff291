"""Pagination — ``page[number]`` / ``page[size]`` -> offset/limit modifier."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import PageSizeOutOfBoundsError, PaginationParseError
from .params import first_value, normalize_query_params
from .query import ParseResult, noop

if TYPE_CHECKING:
    from .config import PageSizeConfig

logger = logging.getLogger(__name__)

PAGE_NUMBER_KEY = "page[number]"
PAGE_SIZE_KEY = "page[size]"

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Pagination(NamedTuple):
    offset: int
    limit: int

    @classmethod
    def from_page(cls, number: int, size: int) -> Pagination:
        # offset for page n > 0 is size * n - 1
        offset = 0 if number == 0 else size * number - 1
        return cls(offset=offset, limit=size)

    def apply(self, query: Any) -> Any:
        query = query.offset(self.offset)
        return query.limit(self.limit)


def _parse_int(key: str, raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise PaginationParseError(key, raw)
    return int(raw)


def parse_pagination(
    query_params: Any, config: PageSizeConfig
) -> Pagination | None:
    """Return the requested page, or ``None`` when pagination is absent.

    Raises:
        PaginationParseError: A value is not an integer or the page number
            is negative.
        PageSizeOutOfBoundsError: The size is outside the configured bounds.
    """
    params = normalize_query_params(query_params)
    number_raw = first_value(params, PAGE_NUMBER_KEY)
    size_raw = first_value(params, PAGE_SIZE_KEY)
    if not number_raw or not size_raw:
        return None

    number = _parse_int(PAGE_NUMBER_KEY, number_raw)
    size = _parse_int(PAGE_SIZE_KEY, size_raw)
    if size < config.min_page_size or size > config.max_page_size:
        raise PageSizeOutOfBoundsError(size, config.min_page_size, config.max_page_size)
    if number < 0:
        raise PaginationParseError(PAGE_NUMBER_KEY, number_raw, "must not be negative")
    return Pagination.from_page(number, size)


def pagination_from_params(
    query_params: Any, config: PageSizeConfig
) -> ParseResult:
    """Build a modifier that sets offset and limit from the request.

    Absent pagination yields a no-op modifier. On error the result holds
    no modifier.
    """
    try:
        pagination = parse_pagination(query_params, config)
    except (PaginationParseError, PageSizeOutOfBoundsError) as e:
        logger.debug("Rejected pagination parameters: %s", e)
        return ParseResult(None, e)
    if pagination is None:
        return ParseResult(noop)
    return ParseResult(pagination.apply)

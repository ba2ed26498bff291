"""JSON:API query parameters — pagination, sorting, filtering as query modifiers."""

from __future__ import annotations

from .composer import filter_paging_sorting_from_params
from .config import PageSizeConfig, build_config, load_config
from .exceptions import (
    ConfigurationError,
    InvalidFilterError,
    InvalidSortError,
    JsonApiQueryError,
    PageSizeOutOfBoundsError,
    PaginationError,
    PaginationParseError,
    QueryParamError,
    SanitizationError,
)
from .filtering import ParsedFilter, filtering_from_params, parse_filters
from .mapping import ColumnMapper, MapMapper
from .memory import InMemoryQuery
from .pagination import Pagination, pagination_from_params, parse_pagination
from .params import normalize_query_params
from .query import ParseResult, QueryBuilder, QueryModifier, SortDirection, chain, noop
from .query_string import QueryStringBuilder
from .sanitizer import IdentitySanitizer, TypedSanitizer, ValueSanitizer
from .sorting import ParsedSort, SortEntry, parse_sort, sorting_from_params

__all__ = [
    # Capabilities
    "ColumnMapper",
    "MapMapper",
    "ValueSanitizer",
    "IdentitySanitizer",
    "TypedSanitizer",
    # Query modifiers
    "QueryBuilder",
    "QueryModifier",
    "ParseResult",
    "SortDirection",
    "chain",
    "noop",
    "InMemoryQuery",
    # Parsers
    "Pagination",
    "ParsedFilter",
    "ParsedSort",
    "SortEntry",
    "filter_paging_sorting_from_params",
    "filtering_from_params",
    "normalize_query_params",
    "pagination_from_params",
    "parse_filters",
    "parse_pagination",
    "parse_sort",
    "sorting_from_params",
    "QueryStringBuilder",
    # Config
    "PageSizeConfig",
    "build_config",
    "load_config",
    # Exceptions
    "ConfigurationError",
    "InvalidFilterError",
    "InvalidSortError",
    "JsonApiQueryError",
    "PageSizeOutOfBoundsError",
    "PaginationError",
    "PaginationParseError",
    "QueryParamError",
    "SanitizationError",
]

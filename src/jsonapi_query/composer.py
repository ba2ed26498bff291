"""Combine sorting, pagination and filtering into one modifier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .filtering import filtering_from_params
from .pagination import pagination_from_params
from .params import normalize_query_params
from .query import QueryModifier, chain
from .sorting import sorting_from_params

if TYPE_CHECKING:
    from .config import PageSizeConfig
    from .mapping import ColumnMapper
    from .sanitizer import ValueSanitizer

logger = logging.getLogger(__name__)


def filter_paging_sorting_from_params(
    query_params: Any,
    mapper: ColumnMapper,
    sanitizer: ValueSanitizer,
    config: PageSizeConfig,
) -> QueryModifier:
    """Return a modifier applying sorting, filtering and pagination.

    Parsers run in the order sorting, pagination, filtering, and the first
    error is raised straight away: an invalid ``sort`` field hides any
    pagination or filter problem in the same request, and later parsers
    are not run at all.

    The modifier applies sorting, then filtering, then pagination, so that
    offset and limit come after every ordering and predicate clause.

    Raises:
        InvalidSortError: Some sort field is not mapped.
        PaginationError: Page number or size is malformed or out of bounds.
        InvalidFilterError: Some filter field is unmapped or has bad values.
    """
    params = normalize_query_params(query_params)

    sorting = sorting_from_params(params, mapper).unwrap()
    pagination = pagination_from_params(params, config).unwrap()
    filtering = filtering_from_params(params, mapper, sanitizer).unwrap()

    logger.debug("Composed query modifier for params: %s", sorted(params))
    return chain(sorting, filtering, pagination)

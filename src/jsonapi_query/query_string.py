"""QueryStringBuilder — page/sort/filter -> JSON:API query string (links)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from .filtering import FILTER_PREFIX, FILTER_SUFFIX
from .pagination import PAGE_NUMBER_KEY, PAGE_SIZE_KEY
from .query import SortDirection
from .sorting import SORT_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class QueryStringBuilder:
    """Build a query string for ``self``/``next``/``prev`` pagination links.

    Field names here are the public names a client sends, not columns.
    """

    def build(
        self,
        *,
        page_number: int | None = None,
        page_size: int | None = None,
        sort: Sequence[tuple[str, SortDirection | str]] | None = None,
        filters: Mapping[str, Sequence[Any] | Any] | None = None,
    ) -> str:
        """Produce the query string.

        Filter values are comma-joined, so a value that itself contains a
        comma cannot round-trip and raises ``ValueError``.
        """
        params: list[tuple[str, str]] = []
        if filters:
            for name, values in filters.items():
                items = values if isinstance(values, (list, tuple)) else [values]
                joined = ",".join(_filter_value(name, v) for v in items)
                params.append((f"{FILTER_PREFIX}{name}{FILTER_SUFFIX}", joined))
        if sort:
            params.append(
                (
                    SORT_KEY,
                    ",".join(
                        f"-{name}" if SortDirection(direction) is SortDirection.DESC else name
                        for name, direction in sort
                    ),
                )
            )
        if page_number is not None and page_size is not None:
            params.append((PAGE_NUMBER_KEY, str(page_number)))
            params.append((PAGE_SIZE_KEY, str(page_size)))
        return urlencode(params, safe="[],") if params else ""

    def next_page(self, page_number: int, page_size: int, **kwargs: Any) -> str:
        """Query string for the page after *page_number*."""
        return self.build(page_number=page_number + 1, page_size=page_size, **kwargs)

    def previous_page(self, page_number: int, page_size: int, **kwargs: Any) -> str | None:
        """Query string for the page before *page_number*, ``None`` on the first page."""
        if page_number <= 0:
            return None
        return self.build(page_number=page_number - 1, page_size=page_size, **kwargs)


def _filter_value(name: str, value: Any) -> str:
    text = str(value)
    if "," in text:
        raise ValueError(
            f"Filter value {text!r} for {name!r} contains ',' and would be "
            "split into several values"
        )
    return text

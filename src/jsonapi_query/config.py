"""Page size bounds loaded once from the environment.

Usage::

    config = load_config()  # at startup, exits on a bad environment
    modifier = filter_paging_sorting_from_params(params, mapper, sanitizer, config)
"""

from __future__ import annotations

import functools
import logging

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PageSizeConfig(BaseSettings):
    """Bounds applied to ``page[size]``.

    Reads ``MIN_PAGE_SIZE`` and ``MAX_PAGE_SIZE`` from the environment.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    min_page_size: int = Field(default=1, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> PageSizeConfig:
        if self.max_page_size < self.min_page_size:
            raise ValueError(
                f"max_page_size ({self.max_page_size}) must be >= "
                f"min_page_size ({self.min_page_size})"
            )
        return self


def build_config(**overrides: int) -> PageSizeConfig:
    """Build a config from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If a value cannot be parsed or the bounds
            are inconsistent.
    """
    try:
        return PageSizeConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            f"Failed to parse jsonapi params from environment: {e}"
        ) from e


@functools.lru_cache(maxsize=1)
def load_config() -> PageSizeConfig:
    """Load the process-wide config; call once at application startup.

    Parsers never load it themselves: the returned value is passed to them
    explicitly. A config that cannot be parsed is fatal: the error is logged
    and the process exits before any request is served.
    """
    try:
        config = build_config()
    except ConfigurationError as e:
        logger.critical("%s", e)
        raise SystemExit(1) from e
    logger.debug(
        "Loaded page size bounds: min=%d max=%d",
        config.min_page_size,
        config.max_page_size,
    )
    return config

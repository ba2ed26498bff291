"""Shared fixtures for jsonapi-query tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsonapi_query import IdentitySanitizer, MapMapper, PageSizeConfig, load_config

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_config_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from a clean environment and an unloaded config."""
    monkeypatch.delenv("MIN_PAGE_SIZE", raising=False)
    monkeypatch.delenv("MAX_PAGE_SIZE", raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def config() -> PageSizeConfig:
    return PageSizeConfig(min_page_size=1, max_page_size=100)


@pytest.fixture
def mapper() -> MapMapper:
    return MapMapper({"name": "col_name", "age": "col_age", "color": "col_color"})


@pytest.fixture
def sanitizer() -> IdentitySanitizer:
    return IdentitySanitizer()

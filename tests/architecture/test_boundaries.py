import pytest
from pytest_archon import archrule

PARSERS = [
    "jsonapi_query.pagination",
    "jsonapi_query.sorting",
    "jsonapi_query.filtering",
    "jsonapi_query.composer",
]


@pytest.mark.parametrize("module", PARSERS)
def test_parsers_are_backend_independent(module: str) -> None:
    """
    Parsers only speak the QueryBuilder protocol.
    SQLAlchemy is reachable through the sqla adapter alone.
    """
    (
        archrule(f"{module}_backend_independent")
        .match(module)
        .should_not_import("sqlalchemy*")
        .should_not_import("jsonapi_query.sqla")
        .check("jsonapi_query")
    )


def test_parsers_are_framework_independent() -> None:
    """
    Request objects are normalized by duck typing; no web framework import.
    """
    (
        archrule("framework_independent")
        .match("jsonapi_query*")
        .should_not_import("starlette*")
        .should_not_import("fastapi*")
        .check("jsonapi_query")
    )


@pytest.mark.parametrize("module", ["jsonapi_query.mapping", "jsonapi_query.sanitizer"])
def test_capabilities_do_not_depend_on_parsers(module: str) -> None:
    """
    ColumnMapper and ValueSanitizer sit below the parsers.
    """
    (
        archrule(f"{module}_layering")
        .match(module)
        .should_not_import("jsonapi_query.pagination")
        .should_not_import("jsonapi_query.sorting")
        .should_not_import("jsonapi_query.filtering")
        .should_not_import("jsonapi_query.composer")
        .check("jsonapi_query", only_direct_imports=True)
    )

"""Tests for filter[...] parameter parsing."""

from __future__ import annotations

from jsonapi_query import (
    InMemoryQuery,
    InvalidFilterError,
    MapMapper,
    TypedSanitizer,
    filtering_from_params,
    parse_filters,
)
from jsonapi_query.filtering import filter_field


class RejectingSanitizer:
    """Rejects one specific token."""

    def __init__(self, bad: str) -> None:
        self.bad = bad

    def sanitize(self, column: str, value: str) -> str:
        if value == self.bad:
            raise ValueError(f"bad value {value!r}")
        return value.upper()


# -- Key extraction ---------------------------------------------------------


def test_filter_field_extraction() -> None:
    assert filter_field("filter[color]") == "color"
    assert filter_field("filter[]") == ""
    assert filter_field("filter[color") is None
    assert filter_field("sort") is None
    assert filter_field("xfilter[color]") is None


# -- Predicates -------------------------------------------------------------


def test_multiple_values_become_membership(mapper, sanitizer) -> None:
    result = filtering_from_params({"filter[color]": "red,blue"}, mapper, sanitizer)
    assert result.ok
    query = result.modifier(InMemoryQuery())
    assert query.where_clauses == ["col_color IN (red, blue)"]


def test_single_value_becomes_equality(mapper, sanitizer) -> None:
    result = filtering_from_params({"filter[color]": "red"}, mapper, sanitizer)
    query = result.modifier(InMemoryQuery())
    assert query.where_clauses == ["col_color = red"]


def test_repeated_parameter_values_are_combined(mapper, sanitizer) -> None:
    result = filtering_from_params(
        "filter[color]=red&filter[color]=green,blue", mapper, sanitizer
    )
    query = result.modifier(InMemoryQuery())
    assert query.where_clauses == ["col_color IN (red, green, blue)"]


def test_non_filter_params_ignored(mapper, sanitizer) -> None:
    result = filtering_from_params(
        {"sort": "name", "page[size]": "1", "name": "x"}, mapper, sanitizer
    )
    assert result.ok
    assert result.modifier(InMemoryQuery()).predicates == []


def test_unmapped_field_reported_valid_still_applied(mapper, sanitizer) -> None:
    result = filtering_from_params(
        {"filter[color]": "red", "filter[bad]": "x"}, mapper, sanitizer
    )
    assert isinstance(result.error, InvalidFilterError)
    assert result.error.fields == ("bad",)
    query = result.modifier(InMemoryQuery())
    assert query.where_clauses == ["col_color = red"]


def test_one_bad_token_discards_whole_key(mapper) -> None:
    sanitizer = RejectingSanitizer("oops")
    result = filtering_from_params(
        {"filter[color]": "red,oops", "filter[name]": "bob"}, mapper, sanitizer
    )
    assert result.error.fields == ("color",)
    query = result.modifier(InMemoryQuery())
    assert query.where_clauses == ["col_name = BOB"]


def test_error_message_names_every_field(mapper, sanitizer) -> None:
    result = filtering_from_params(
        {"filter[a]": "1", "filter[b]": "2"}, mapper, sanitizer
    )
    assert str(result.error) == 'at least one filter parameter is not valid: "a,b"'


def test_value_order_preserved(mapper, sanitizer) -> None:
    parsed, invalid = parse_filters({"filter[age]": "3,1,2"}, mapper, sanitizer)
    assert parsed == {"col_age": ("3", "1", "2")}
    assert invalid == []


def test_typed_values_reach_predicates(mapper) -> None:
    sanitizer = TypedSanitizer({"col_age": int, "col_name": str})
    result = filtering_from_params(
        {"filter[age]": "30,40", "filter[name]": "ann"}, mapper, sanitizer
    )
    assert result.ok
    query = result.modifier(InMemoryQuery())
    assert query.predicates[0].value == (30, 40)
    assert query.predicates[1].value == "ann"


def test_typed_sanitizer_failure_rejects_key(mapper) -> None:
    sanitizer = TypedSanitizer({"col_age": int})
    result = filtering_from_params({"filter[age]": "30,old"}, mapper, sanitizer)
    assert result.error.fields == ("age",)
    assert result.modifier(InMemoryQuery()).predicates == []


def test_aliases_sharing_a_column_extend_values(sanitizer) -> None:
    mapper = MapMapper({"colour": "col_color", "color": "col_color"})
    parsed, _ = parse_filters(
        {"filter[color]": "red", "filter[colour]": "blue"}, mapper, sanitizer
    )
    assert parsed == {"col_color": ("red", "blue")}


def test_empty_value_passed_to_sanitizer(mapper, sanitizer) -> None:
    result = filtering_from_params({"filter[name]": ""}, mapper, sanitizer)
    assert result.modifier(InMemoryQuery()).where_clauses == ["col_name = "]

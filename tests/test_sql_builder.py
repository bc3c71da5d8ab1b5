"""Tests for the verbatim SQL fragment builder."""

from __future__ import annotations

import datetime
import logging

import pytest

from filterkit.conditions import FilterCondition
from filterkit.exceptions import (
    InvalidInputError,
    MalformedFilterError,
    UnsupportedConditionError,
)
from filterkit.model import Filter
from filterkit.sql import (
    SQL_CONDITIONS,
    SQL_TEMPLATES,
    SqlFilterOptions,
    build_sql_filter,
    render_literal,
    translate_sql,
)


def test_single_filter_opens_with_where() -> None:
    sql = build_sql_filter([{"column": "age", "condition": "greaterThan", "value": 18}])
    assert sql == "WHERE age > 18"


def test_chained_filters(age_and_name_filters) -> None:
    assert build_sql_filter(age_and_name_filters) == (
        "WHERE age > 18 AND name LIKE '%an%'"
    )


def test_first_operator_is_discarded() -> None:
    sql = build_sql_filter(
        [{"column": "age", "condition": "lessThan", "value": 5, "operator": "OR"}]
    )
    assert sql == "WHERE age < 5"


def test_later_operator_used_verbatim() -> None:
    sql = build_sql_filter(
        [
            {"column": "a", "condition": "isEqualTo", "value": 1},
            {"column": "b", "condition": "notEqualTo", "value": 2, "operator": "OR"},
            {"column": "c", "condition": "empty", "operator": "and not"},
        ]
    )
    assert sql == "WHERE a = 1 OR b != 2 and not c IS NULL"


def test_missing_operator_defaults_to_and() -> None:
    sql = build_sql_filter(
        [
            {"column": "a", "condition": "notEmpty"},
            {"column": "b", "condition": "notEmpty"},
        ]
    )
    assert sql == "WHERE a IS NOT NULL AND b IS NOT NULL"


@pytest.mark.parametrize(
    ("condition", "expected"),
    [
        ("empty", "WHERE col IS NULL"),
        ("notEmpty", "WHERE col IS NOT NULL"),
        ("lessThan", "WHERE col < v"),
        ("lessThanEqualTo", "WHERE col <= v"),
        ("greaterThan", "WHERE col > v"),
        ("greaterThanEqualTo", "WHERE col >= v"),
        ("isEqualTo", "WHERE col = v"),
        ("notEqualTo", "WHERE col != v"),
        ("isExactly", "WHERE col = 'v'"),
        ("contains", "WHERE col LIKE '%v%'"),
        ("doesNotContain", "WHERE col NOT LIKE '%v%'"),
        ("startsWith", "WHERE col LIKE 'v%'"),
        ("endsWith", "WHERE col LIKE '%v'"),
        ("is", "WHERE col = 'v'"),
        ("isNot", "WHERE col != 'v'"),
        ("isAfter", "WHERE col > 'v'"),
        ("isBefore", "WHERE col < 'v'"),
    ],
)
def test_every_template(condition: str, expected: str) -> None:
    assert (
        build_sql_filter([{"column": "col", "condition": condition, "value": "v"}])
        == expected
    )


def test_vocabulary_excludes_day_range() -> None:
    assert FilterCondition.IS_ON not in SQL_CONDITIONS
    assert set(SQL_TEMPLATES) == SQL_CONDITIONS


def test_values_are_not_escaped() -> None:
    sql = build_sql_filter(
        [{"column": "name", "condition": "isExactly", "value": "O'Brien"}]
    )
    assert sql == "WHERE name = 'O'Brien'"


def test_empty_list_yields_empty_string() -> None:
    assert build_sql_filter([]) == ""


def test_accepts_filter_models() -> None:
    sql = build_sql_filter([Filter(column="age", condition="isEqualTo", value=30)])
    assert sql == "WHERE age = 30"


def test_unknown_condition_is_reported_and_skipped() -> None:
    result = translate_sql(
        [
            {"column": "age", "condition": "greaterThen", "value": 18},
            {"column": "name", "condition": "isExactly", "value": "x", "operator": "OR"},
        ]
    )
    # the first emitted fragment still opens the clause
    assert result.query == "WHERE name = 'x'"
    assert result.skipped_indices == [0]
    error = result.issues[0].error
    assert isinstance(error, UnsupportedConditionError)
    assert "greaterThan" in error.suggestions
    assert error.path == "filters[0]"


def test_date_only_condition_unsupported_in_sql() -> None:
    result = translate_sql([{"column": "d", "condition": "isOn", "value": "2024-01-15"}])
    assert result.query == ""
    assert isinstance(result.issues[0].error, UnsupportedConditionError)


def test_missing_value_is_malformed() -> None:
    result = translate_sql([{"column": "age", "condition": "greaterThan"}])
    assert result.query == ""
    assert isinstance(result.issues[0].error, MalformedFilterError)


def test_non_mapping_entry_is_malformed() -> None:
    result = translate_sql(["age > 18"])
    assert not result.ok
    assert "mapping" in str(result.issues[0].error)


def test_strict_raises_first_issue() -> None:
    with pytest.raises(UnsupportedConditionError):
        translate_sql([{"column": "a", "condition": "nope", "value": 1}], strict=True)


def test_non_list_input_raises() -> None:
    with pytest.raises(InvalidInputError):
        build_sql_filter("WHERE 1 = 1")


def test_skipped_filter_is_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="filterkit.result"):
        translate_sql([{"column": "a", "condition": "nope", "value": 1}])
    assert "Skipping sql filter at index 0" in caplog.text


def test_custom_options() -> None:
    options = SqlFilterOptions(clause_keyword="HAVING", separator="\n")
    sql = build_sql_filter(
        [
            {"column": "total", "condition": "greaterThan", "value": 10},
            {"column": "total", "condition": "lessThan", "value": 20},
        ],
        options=options,
    )
    assert sql == "HAVING total > 10\nAND total < 20"


def test_deterministic_output(age_and_name_filters) -> None:
    assert build_sql_filter(age_and_name_filters) == build_sql_filter(
        age_and_name_filters
    )


def test_render_literal() -> None:
    assert render_literal(None) == "NULL"
    assert render_literal(True) == "true"
    assert render_literal(2.5) == "2.5"
    assert render_literal(datetime.date(2024, 1, 15)) == "2024-01-15"

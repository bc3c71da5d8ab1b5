"""Condition -> WHERE-fragment templates for the SQL translator."""

from __future__ import annotations

from ..conditions import FilterCondition

GENERIC_TEMPLATES: dict[FilterCondition, str] = {
    FilterCondition.EMPTY: "{operator} {column} IS NULL",
    FilterCondition.NOT_EMPTY: "{operator} {column} IS NOT NULL",
    FilterCondition.LESS_THAN: "{operator} {column} < {value}",
    FilterCondition.LESS_THAN_EQUAL_TO: "{operator} {column} <= {value}",
    FilterCondition.GREATER_THAN: "{operator} {column} > {value}",
    FilterCondition.GREATER_THAN_EQUAL_TO: "{operator} {column} >= {value}",
    FilterCondition.IS_EQUAL_TO: "{operator} {column} = {value}",
    FilterCondition.NOT_EQUAL_TO: "{operator} {column} != {value}",
    FilterCondition.IS_EXACTLY: "{operator} {column} = '{value}'",
    FilterCondition.CONTAINS: "{operator} {column} LIKE '%{value}%'",
    FilterCondition.DOES_NOT_CONTAIN: "{operator} {column} NOT LIKE '%{value}%'",
    FilterCondition.STARTS_WITH: "{operator} {column} LIKE '{value}%'",
    FilterCondition.ENDS_WITH: "{operator} {column} LIKE '%{value}'",
}

# Date values are compared as quoted literals.
DATE_TEMPLATES: dict[FilterCondition, str] = {
    FilterCondition.IS: "{operator} {column} = '{value}'",
    FilterCondition.IS_AFTER: "{operator} {column} > '{value}'",
    FilterCondition.IS_BEFORE: "{operator} {column} < '{value}'",
    FilterCondition.IS_NOT: "{operator} {column} != '{value}'",
    FilterCondition.EMPTY: "{operator} {column} IS NULL",
    FilterCondition.NOT_EMPTY: "{operator} {column} IS NOT NULL",
}

SQL_TEMPLATES: dict[FilterCondition, str] = {**GENERIC_TEMPLATES, **DATE_TEMPLATES}

SQL_CONDITIONS: frozenset[FilterCondition] = frozenset(SQL_TEMPLATES)

"""SQL-mode translation: verbatim WHERE fragments and parameterized clauses."""

from __future__ import annotations

from .builder import (
    DEFAULT_SQL_OPTIONS,
    SqlFilterOptions,
    build_sql_filter,
    render_literal,
    translate_sql,
)
from .clause import build_sql_clause
from .operators import DEFAULT_CLAUSE_REGISTRY, build_default_clause_registry
from .strategy import SqlClauseOperator, SqlClauseOperatorRegistry
from .templates import DATE_TEMPLATES, GENERIC_TEMPLATES, SQL_CONDITIONS, SQL_TEMPLATES

__all__ = [
    "DATE_TEMPLATES",
    "DEFAULT_CLAUSE_REGISTRY",
    "DEFAULT_SQL_OPTIONS",
    "GENERIC_TEMPLATES",
    "SQL_CONDITIONS",
    "SQL_TEMPLATES",
    "SqlClauseOperator",
    "SqlClauseOperatorRegistry",
    "SqlFilterOptions",
    "build_default_clause_registry",
    "build_sql_clause",
    "build_sql_filter",
    "render_literal",
    "translate_sql",
]

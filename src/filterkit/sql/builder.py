"""
SQL WHERE-fragment builder.

Values are substituted into the fragment verbatim: nothing is escaped or
bound. The output is text for a trusted caller to splice into a statement.
Use :func:`filterkit.sql.clause.build_sql_clause` when values come from
untrusted input.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Any

from ..conditions import TranslationMode, parse_condition
from ..exceptions import MalformedFilterError, UnsupportedConditionError
from ..model import check_required_parts, coerce_filters, path_for
from ..result import TranslationResult, record_issue
from .templates import SQL_CONDITIONS, SQL_TEMPLATES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SqlFilterOptions:
    """
    Rendering options for the SQL fragment builder.

    Attributes:
        clause_keyword: Keyword forced onto the first emitted fragment.
        default_operator: Joiner used when a later filter declares none.
        separator: Text placed between rendered fragments.
    """

    clause_keyword: str = "WHERE"
    default_operator: str = "AND"
    separator: str = " "


DEFAULT_SQL_OPTIONS = SqlFilterOptions()


def render_literal(value: Any) -> str:
    """Render a filter value as it appears inside a fragment."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def translate_sql(
    filters: Any,
    *,
    strict: bool = False,
    options: SqlFilterOptions = DEFAULT_SQL_OPTIONS,
) -> TranslationResult[str]:
    """
    Translate *filters* into a chained WHERE fragment.

    The first fragment that is actually emitted opens with
    ``options.clause_keyword``; its declared operator is discarded. Later
    fragments are prefixed with their own ``operator`` exactly as given.

    Filters with an unsupported condition or a missing part are skipped
    and reported on the result (raised instead when *strict* is set).
    """
    mode = TranslationMode.SQL.value
    result: TranslationResult[str] = TranslationResult(query="")
    supported = sorted(c.value for c in SQL_CONDITIONS)
    fragments: list[str] = []

    for index, item in coerce_filters(filters):
        if isinstance(item, MalformedFilterError):
            record_issue(result, index, item, mode=mode, strict=strict)
            continue

        condition = parse_condition(item.condition)
        malformed = check_required_parts(item, condition, index)
        if malformed is not None:
            record_issue(result, index, malformed, mode=mode, strict=strict)
            continue

        template = SQL_TEMPLATES.get(condition) if condition is not None else None
        if template is None:
            record_issue(
                result,
                index,
                UnsupportedConditionError(
                    item.condition,
                    mode,
                    supported,
                    path=path_for(index),
                ),
                mode=mode,
                strict=strict,
            )
            continue

        if fragments:
            operator = item.operator or options.default_operator
        else:
            operator = options.clause_keyword
        fragments.append(
            template.format(
                operator=operator,
                column=item.column,
                value=render_literal(item.value) if item.has_value else "",
            )
        )

    result.query = options.separator.join(fragments)
    logger.debug(
        "Built SQL filter from %d fragment(s), %d skipped",
        len(fragments),
        len(result.issues),
    )
    return result


def build_sql_filter(
    filters: Any,
    *,
    strict: bool = False,
    options: SqlFilterOptions = DEFAULT_SQL_OPTIONS,
) -> str:
    """Return the WHERE fragment for *filters* (``""`` for an empty list)."""
    return translate_sql(filters, strict=strict, options=options).query

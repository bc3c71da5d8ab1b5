"""Parameterized SQLAlchemy clause builder over the SQL-mode vocabulary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, column, or_

from ..conditions import TranslationMode, parse_condition
from ..exceptions import MalformedFilterError, UnsupportedConditionError
from ..model import check_required_parts, coerce_filters, path_for
from ..result import TranslationResult, record_issue
from .operators import DEFAULT_CLAUSE_REGISTRY

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, FromClause

    from .strategy import SqlClauseOperatorRegistry

logger = logging.getLogger(__name__)

_JOINERS = {"AND": and_, "OR": or_}


def _resolve_column(name: str, table: FromClause | None, index: int) -> Any:
    if table is None:
        return column(name)
    try:
        return table.c[name]
    except KeyError as err:
        raise MalformedFilterError(
            f"Unknown column '{name}' on '{getattr(table, 'name', table)}'",
            path=path_for(index),
        ) from err


def build_sql_clause(
    filters: Any,
    *,
    table: FromClause | None = None,
    strict: bool = False,
    registry: SqlClauseOperatorRegistry = DEFAULT_CLAUSE_REGISTRY,
) -> TranslationResult[ColumnElement[bool] | None]:
    """
    Compile *filters* into a SQLAlchemy boolean expression with bound values.

    Conditions are combined left to right: each filter after the first is
    joined to everything before it with its own ``operator`` (``AND`` when
    absent, ``OR`` allowed). When *table* is given, column names are
    resolved against ``table.c``; otherwise ad-hoc ``column()`` clauses
    are used.

    ``query`` is ``None`` when no filter survived.
    """
    mode = TranslationMode.SQL.value
    result: TranslationResult[ColumnElement[bool] | None] = TranslationResult(
        query=None
    )
    supported = sorted(c.value for c in registry.supported_conditions)
    clause: ColumnElement[bool] | None = None

    for index, item in coerce_filters(filters):
        if isinstance(item, MalformedFilterError):
            record_issue(result, index, item, mode=mode, strict=strict)
            continue

        condition = parse_condition(item.condition)
        malformed = check_required_parts(item, condition, index)
        if malformed is not None:
            record_issue(result, index, malformed, mode=mode, strict=strict)
            continue

        strategy = registry.get(condition) if condition is not None else None
        if strategy is None:
            record_issue(
                result,
                index,
                UnsupportedConditionError(
                    item.condition, mode, supported, path=path_for(index)
                ),
                mode=mode,
                strict=strict,
            )
            continue

        joiner = _JOINERS.get((item.operator or "AND").strip().upper())
        if clause is not None and joiner is None:
            record_issue(
                result,
                index,
                MalformedFilterError(
                    f"Operator must be AND or OR, got '{item.operator}'",
                    path=path_for(index),
                ),
                mode=mode,
                strict=strict,
            )
            continue

        try:
            target = _resolve_column(item.column, table, index)
            expression = strategy.apply(target, item.value)
        except MalformedFilterError as exc:
            record_issue(result, index, exc, mode=mode, strict=strict)
            continue
        except ValueError as exc:
            record_issue(
                result,
                index,
                MalformedFilterError(str(exc), path=path_for(index)),
                mode=mode,
                strict=strict,
            )
            continue

        if clause is None or joiner is None:
            clause = expression
        else:
            clause = joiner(clause, expression)

    result.query = clause
    logger.debug("Built SQL clause, %d filter(s) skipped", len(result.issues))
    return result

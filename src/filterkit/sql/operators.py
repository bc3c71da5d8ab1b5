"""SQLAlchemy clause operators for every SQL-mode condition."""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, cast

from ..conditions import FilterCondition
from ..utils import parse_datetime
from .strategy import SqlClauseOperator, SqlClauseOperatorRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.sql.elements import ColumnElement

# -- Null / existence --------------------------------------------------------


class EmptyOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.EMPTY

    def apply(self, column: Any, _value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_(None))


class NotEmptyOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.NOT_EMPTY

    def apply(self, column: Any, _value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.is_not(None))


# -- Comparison --------------------------------------------------------------


class ComparisonOperator(SqlClauseOperator):
    """Binary comparison bound to one ``operator`` module function."""

    def __init__(
        self, condition: FilterCondition, compare: Callable[[Any, Any], Any]
    ) -> None:
        self._condition = condition
        self._compare = compare

    @property
    def name(self) -> FilterCondition:
        return self._condition

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._compare(column, value))


class IsExactlyOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.IS_EXACTLY

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column == str(value))


# -- Pattern -----------------------------------------------------------------


class ContainsOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.CONTAINS

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.contains(str(value), autoescape=True))


class DoesNotContainOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.DOES_NOT_CONTAIN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", ~column.contains(str(value), autoescape=True)
        )


class StartsWithOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.STARTS_WITH

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast(
            "ColumnElement[bool]", column.startswith(str(value), autoescape=True)
        )


class EndsWithOperator(SqlClauseOperator):
    @property
    def name(self) -> FilterCondition:
        return FilterCondition.ENDS_WITH

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.endswith(str(value), autoescape=True))


# -- Dates -------------------------------------------------------------------


class DateComparisonOperator(ComparisonOperator):
    """Comparison against a value parsed as a date or datetime."""

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", self._compare(column, parse_datetime(value)))


def build_default_clause_registry() -> SqlClauseOperatorRegistry:
    """Create a registry with a clause operator for every SQL-mode condition."""
    registry = SqlClauseOperatorRegistry()
    registry.register_all(
        # Null / existence
        EmptyOperator(),
        NotEmptyOperator(),
        # Comparison
        ComparisonOperator(FilterCondition.LESS_THAN, op_module.lt),
        ComparisonOperator(FilterCondition.LESS_THAN_EQUAL_TO, op_module.le),
        ComparisonOperator(FilterCondition.GREATER_THAN, op_module.gt),
        ComparisonOperator(FilterCondition.GREATER_THAN_EQUAL_TO, op_module.ge),
        ComparisonOperator(FilterCondition.IS_EQUAL_TO, op_module.eq),
        ComparisonOperator(FilterCondition.NOT_EQUAL_TO, op_module.ne),
        IsExactlyOperator(),
        # Pattern
        ContainsOperator(),
        DoesNotContainOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        # Dates
        DateComparisonOperator(FilterCondition.IS, op_module.eq),
        DateComparisonOperator(FilterCondition.IS_NOT, op_module.ne),
        DateComparisonOperator(FilterCondition.IS_AFTER, op_module.gt),
        DateComparisonOperator(FilterCondition.IS_BEFORE, op_module.lt),
    )
    return registry


DEFAULT_CLAUSE_REGISTRY: SqlClauseOperatorRegistry = build_default_clause_registry()

"""Clause operators that turn one filter into a bound SQLAlchemy predicate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from ..conditions import FilterCondition


class SqlClauseOperator(ABC):
    """Turns one filter condition into a bound SQLAlchemy predicate."""

    @property
    @abstractmethod
    def name(self) -> FilterCondition:
        """The filter condition this operator answers for."""
        ...

    @abstractmethod
    def apply(
        self,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool]:
        """
        Build the predicate for *column* and *value*.

        Args:
            column: A SQLAlchemy column or column clause.
            value: The filter value; bound as a parameter, never inlined.

        Returns:
            A SQLAlchemy boolean expression.
        """
        ...


class SqlClauseOperatorRegistry:
    """Lookup table from filter condition to the operator that compiles it."""

    def __init__(self) -> None:
        self._operators: dict[FilterCondition, SqlClauseOperator] = {}

    def register(self, operator: SqlClauseOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SqlClauseOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: FilterCondition) -> SqlClauseOperator | None:
        return self._operators.get(name)

    def has(self, name: FilterCondition) -> bool:
        return name in self._operators

    @property
    def supported_conditions(self) -> set[FilterCondition]:
        return set(self._operators.keys())

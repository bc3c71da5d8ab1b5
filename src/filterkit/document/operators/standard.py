"""Comparison and equality conditions for MongoDB query compilation."""

from __future__ import annotations

from typing import Any

from ...conditions import FilterCondition

_MONGO_OP_MAP: dict[FilterCondition, str] = {
    FilterCondition.LESS_THAN: "$lt",
    FilterCondition.LESS_THAN_EQUAL_TO: "$lte",
    FilterCondition.GREATER_THAN: "$gt",
    FilterCondition.GREATER_THAN_EQUAL_TO: "$gte",
    FilterCondition.NOT_EQUAL_TO: "$ne",
}

# Direct value match: {field: value}
_EQUALITY = frozenset({FilterCondition.IS_EQUAL_TO, FilterCondition.IS_EXACTLY})

STANDARD_CONDITIONS: frozenset[FilterCondition] = frozenset(_MONGO_OP_MAP) | _EQUALITY


def compile_standard(
    field: str, condition: FilterCondition, val: Any
) -> dict[str, Any] | None:
    """Compile comparison conditions. Returns None if not a comparison."""
    if condition in _EQUALITY:
        return {field: val}
    mongo_op = _MONGO_OP_MAP.get(condition)
    if mongo_op:
        return {field: {mongo_op: val}}
    return None

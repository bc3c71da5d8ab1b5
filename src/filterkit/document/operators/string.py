"""Pattern conditions -> $regex with the value matched literally."""

from __future__ import annotations

import re
from typing import Any

from ...conditions import FilterCondition

STRING_CONDITIONS: frozenset[FilterCondition] = frozenset(
    {
        FilterCondition.CONTAINS,
        FilterCondition.DOES_NOT_CONTAIN,
        FilterCondition.STARTS_WITH,
        FilterCondition.ENDS_WITH,
    }
)


def compile_string(
    field: str, condition: FilterCondition, val: Any
) -> dict[str, Any] | None:
    """Compile pattern conditions to MongoDB $regex. Returns None if not a pattern."""
    if condition not in STRING_CONDITIONS:
        return None
    if val is None or isinstance(val, (dict, list)):
        raise ValueError(f"Condition '{condition.value}' requires a text value")
    pattern = re.escape(str(val))
    if condition == FilterCondition.CONTAINS:
        return {field: {"$regex": pattern}}
    if condition == FilterCondition.STARTS_WITH:
        return {field: {"$regex": "^" + pattern}}
    if condition == FilterCondition.ENDS_WITH:
        return {field: {"$regex": pattern + "$"}}
    return {field: {"$not": {"$regex": pattern}}}

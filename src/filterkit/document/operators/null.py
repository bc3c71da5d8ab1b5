"""Existence checks -> $eq / $ne against null."""

from __future__ import annotations

from typing import Any

from ...conditions import FilterCondition

NULL_CONDITIONS: frozenset[FilterCondition] = frozenset(
    {FilterCondition.EMPTY, FilterCondition.NOT_EMPTY}
)


def compile_null(
    field: str, condition: FilterCondition, _val: Any
) -> dict[str, Any] | None:
    """Compile existence conditions. Returns None if not an existence check."""
    if condition == FilterCondition.EMPTY:
        return {field: {"$eq": None}}
    if condition == FilterCondition.NOT_EMPTY:
        return {field: {"$ne": None}}
    return None

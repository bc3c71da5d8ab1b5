"""Temporal conditions -> datetime comparisons and whole-day ranges."""

from __future__ import annotations

from typing import Any

from ...conditions import FilterCondition
from ...utils import day_bounds, parse_datetime

DATE_CONDITIONS: frozenset[FilterCondition] = frozenset(
    {FilterCondition.IS_AFTER, FilterCondition.IS_BEFORE, FilterCondition.IS_ON}
)


def compile_date(
    field: str, condition: FilterCondition, val: Any
) -> dict[str, Any] | None:
    """
    Compile temporal conditions. Returns None if not a temporal condition.

    ``isOn`` matches any timestamp inside the calendar day of *val*:
    ``[day 00:00, next day 00:00)``.

    Raises:
        ValueError: If *val* cannot be parsed as a date.
    """
    if condition == FilterCondition.IS_AFTER:
        return {field: {"$gt": parse_datetime(val)}}
    if condition == FilterCondition.IS_BEFORE:
        return {field: {"$lt": parse_datetime(val)}}
    if condition == FilterCondition.IS_ON:
        start, end = day_bounds(val)
        return {field: {"$gte": start, "$lt": end}}
    return None

"""
Shared value helpers for the translators.

These are pure-Python helpers with no infrastructure dependencies.
"""

from __future__ import annotations

import datetime
from typing import Any


def _read_datetime(value: Any) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, str) and value.strip():
        text = value.strip().replace("Z", "+00:00")
        try:
            return datetime.datetime.fromisoformat(text)
        except ValueError as err:
            raise ValueError(f"Unrecognised date format: {value!r}") from err
    raise ValueError(f"Unrecognised date format: {value!r}")


def _to_utc(moment: datetime.datetime) -> datetime.datetime:
    if moment.tzinfo is None:
        return moment
    try:
        return moment.astimezone(datetime.timezone.utc)
    except OverflowError as err:
        raise ValueError(f"Date out of range: {moment.isoformat()}") from err


def parse_datetime(value: Any) -> datetime.datetime:
    """
    Parse *value* into a ``datetime``.

    Accepts ``datetime`` and ``date`` objects and ISO-8601 strings
    (``"2024-01-15"``, ``"2024-01-15T10:30:00Z"``). A bare date means
    midnight of that day. Aware values are converted to UTC.

    Raises:
        ValueError: If *value* cannot be read as a date or falls outside
            the representable range once converted.
    """
    return _to_utc(_read_datetime(value))


def day_bounds(value: Any) -> tuple[datetime.datetime, datetime.datetime]:
    """
    Return the half-open ``[start, end)`` range covering the calendar day of *value*.

    The day is taken in *value*'s own timezone; any time-of-day component
    is discarded before aware bounds are converted to UTC.

    Raises:
        ValueError: If *value* cannot be read as a date or the day has no
            representable end.
    """
    moment = _read_datetime(value)
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        end = start + datetime.timedelta(days=1)
    except OverflowError as err:
        raise ValueError(f"Date out of range: {start.date().isoformat()}") from err
    return _to_utc(start), _to_utc(end)

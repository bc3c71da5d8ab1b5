"""
In-memory record collection helpers.

Records are mappings (typically dicts) identified by their ``"id"`` key.
Every helper returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidInputError


def _require_list(array: Any, argument: str) -> list[Any]:
    if not isinstance(array, (list, tuple)):
        raise InvalidInputError(
            f"{argument} must be a list, got {type(array).__name__}",
            argument=argument,
        )
    return list(array)


def _require_mapping(value: Any, argument: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidInputError(
            f"{argument} must be a mapping, got {type(value).__name__}",
            argument=argument,
        )
    return value


def _field_of(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return None


def get_unique_values(data: Any, field: Any) -> list[Any]:
    """
    Return the distinct values of *field* across *data*, in first-seen order.

    Records without the field contribute ``None``. Values of different
    types never collapse into one, even when they compare equal.
    """
    records = _require_list(data, "data")
    if not isinstance(field, str):
        raise InvalidInputError(
            f"field must be a string, got {type(field).__name__}", argument="field"
        )

    # keyed by type so 1, 1.0 and True stay distinct
    seen: set[tuple[type, Any]] = set()
    unique: list[Any] = []
    for record in records:
        value = _field_of(record, field)
        key = (type(value), value)
        try:
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            # unhashable values fall back to equality
            if any(type(u) is type(value) and u == value for u in unique):
                continue
        unique.append(value)
    return unique


def create_data(array: Any, new_object: Any) -> list[Any]:
    """Return a new list holding *array* followed by *new_object*."""
    records = _require_list(array, "array")
    _require_mapping(new_object, "new_object")
    return [*records, new_object]


def update_data(array: Any, id: Any, data: Any) -> list[Any]:
    """
    Return a new list where the record with ``id`` equal to *id* is merged with *data*.

    The merge is shallow (``{**record, **data}``). Records that do not match
    are kept as they are, so an unknown *id* yields an unchanged copy.
    """
    records = _require_list(array, "array")
    changes = _require_mapping(data, "data")
    return [
        {**record, **changes}
        if isinstance(record, Mapping) and record.get("id") == id
        else record
        for record in records
    ]


def delete_data(array: Any, id: Any) -> list[Any]:
    """Return a new list without the records whose ``id`` equals *id*."""
    records = _require_list(array, "array")
    return [record for record in records if _field_of(record, "id") != id]

"""Filter descriptor model shared by every translation mode."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .conditions import EXISTENCE_CONDITIONS, FilterCondition
from .exceptions import InvalidInputError, MalformedFilterError


class _Missing:
    """Marker for a filter that carries no value at all."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
        return self


MISSING: Final = _Missing()


class Filter(BaseModel):
    """
    One filtering instruction: ``column <condition> value``.

    ``condition`` stays a plain string so that tags outside the vocabulary
    reach the translators and are reported there instead of failing here.
    ``operator`` is only read by the SQL translators.
    """

    model_config = ConfigDict(frozen=True)

    column: str = ""
    condition: str = ""
    value: Any = MISSING
    operator: str | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not MISSING

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"column": self.column, "condition": self.condition}
        if self.has_value:
            data["value"] = self.value
        if self.operator is not None:
            data["operator"] = self.operator
        return data


def path_for(index: int) -> str:
    return f"filters[{index}]"


def coerce_filters(
    filters: Any,
) -> list[tuple[int, Filter | MalformedFilterError]]:
    """
    Turn the caller's filter list into ``(index, Filter)`` pairs.

    Entries that cannot be read as a filter are paired with a
    ``MalformedFilterError`` instead, so callers can report and skip them.

    Raises:
        InvalidInputError: If *filters* is not a list-like sequence.
    """
    if isinstance(filters, (str, bytes)) or not isinstance(filters, Sequence):
        raise InvalidInputError(
            f"filters must be a list of filter descriptors, "
            f"got {type(filters).__name__}",
            argument="filters",
        )

    coerced: list[tuple[int, Filter | MalformedFilterError]] = []
    for index, entry in enumerate(filters):
        if isinstance(entry, Filter):
            coerced.append((index, entry))
            continue
        if not isinstance(entry, Mapping):
            coerced.append(
                (
                    index,
                    MalformedFilterError(
                        f"Filter must be a mapping, got {type(entry).__name__}",
                        path=path_for(index),
                    ),
                )
            )
            continue
        try:
            coerced.append((index, Filter.model_validate(dict(entry))))
        except PydanticValidationError as exc:
            messages = []
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                messages.append(f"{loc}: {error.get('msg', 'invalid')}")
            coerced.append(
                (
                    index,
                    MalformedFilterError("; ".join(messages), path=path_for(index)),
                )
            )
    return coerced


def check_required_parts(
    item: Filter, condition: FilterCondition | None, index: int
) -> MalformedFilterError | None:
    """Return an error when *item* lacks a column, a condition or a needed value."""
    if not item.column:
        return MalformedFilterError("Filter is missing 'column'", path=path_for(index))
    if not item.condition:
        return MalformedFilterError(
            "Filter is missing 'condition'", path=path_for(index)
        )
    if condition in EXISTENCE_CONDITIONS:
        return None
    if condition is not None and not item.has_value:
        return MalformedFilterError(
            f"Condition '{item.condition}' requires a 'value'",
            path=path_for(index),
        )
    return None

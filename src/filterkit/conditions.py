from enum import Enum


class FilterCondition(str, Enum):
    """Condition tags understood by the filter translators."""

    # Null / existence checks
    EMPTY = "empty"
    NOT_EMPTY = "notEmpty"

    # Ordering
    LESS_THAN = "lessThan"
    LESS_THAN_EQUAL_TO = "lessThanEqualTo"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_EQUAL_TO = "greaterThanEqualTo"

    # Equality
    IS_EQUAL_TO = "isEqualTo"
    NOT_EQUAL_TO = "notEqualTo"
    IS_EXACTLY = "isExactly"

    # Pattern matching
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "doesNotContain"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"

    # Dates
    IS = "is"
    IS_NOT = "isNot"
    IS_AFTER = "isAfter"
    IS_BEFORE = "isBefore"
    IS_ON = "isOn"


class TranslationMode(str, Enum):
    """Output backends of the filter translator."""

    SQL = "sql"
    DOCUMENT = "document"


# Conditions that never read the filter value.
EXISTENCE_CONDITIONS: frozenset[FilterCondition] = frozenset(
    {FilterCondition.EMPTY, FilterCondition.NOT_EMPTY}
)


def parse_condition(tag: str) -> FilterCondition | None:
    """Return the enum member for *tag*, or ``None`` for unknown tags."""
    try:
        return FilterCondition(tag)
    except ValueError:
        return None

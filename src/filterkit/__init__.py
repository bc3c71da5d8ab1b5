from .conditions import EXISTENCE_CONDITIONS, FilterCondition, TranslationMode
from .document import (
    DOCUMENT_CONDITIONS,
    DocumentQueryBuilder,
    build_document_filter,
    translate_document,
)
from .exceptions import (
    FilterKitError,
    InvalidInputError,
    MalformedFilterError,
    UnsupportedConditionError,
)
from .ids import IIDGenerator, RandomIdGenerator, UUID4Generator, generate_id
from .model import MISSING, Filter
from .records import create_data, delete_data, get_unique_values, update_data
from .result import FilterIssue, TranslationResult
from .sql import (
    SQL_CONDITIONS,
    SqlFilterOptions,
    build_sql_clause,
    build_sql_filter,
    translate_sql,
)

__all__ = [
    # Core types
    "Filter",
    "FilterCondition",
    "MISSING",
    "TranslationMode",
    "EXISTENCE_CONDITIONS",
    # SQL mode
    "SQL_CONDITIONS",
    "SqlFilterOptions",
    "build_sql_filter",
    "translate_sql",
    "build_sql_clause",
    # Document mode
    "DOCUMENT_CONDITIONS",
    "DocumentQueryBuilder",
    "build_document_filter",
    "translate_document",
    # Results
    "FilterIssue",
    "TranslationResult",
    # Exceptions
    "FilterKitError",
    "InvalidInputError",
    "MalformedFilterError",
    "UnsupportedConditionError",
    # Record helpers
    "create_data",
    "delete_data",
    "get_unique_values",
    "update_data",
    # Identifiers
    "IIDGenerator",
    "RandomIdGenerator",
    "UUID4Generator",
    "generate_id",
]

"""MongoDB condition compilers for the document translator."""

from __future__ import annotations

from .date import DATE_CONDITIONS, compile_date
from .null import NULL_CONDITIONS, compile_null
from .standard import STANDARD_CONDITIONS, compile_standard
from .string import STRING_CONDITIONS, compile_string

DOCUMENT_CONDITIONS = (
    STANDARD_CONDITIONS | STRING_CONDITIONS | NULL_CONDITIONS | DATE_CONDITIONS
)

__all__ = [
    "DOCUMENT_CONDITIONS",
    "compile_date",
    "compile_null",
    "compile_standard",
    "compile_string",
]

"""Document-mode translation: filter lists to MongoDB query documents."""

from __future__ import annotations

from .builder import DocumentQueryBuilder, build_document_filter, translate_document
from .operators import DOCUMENT_CONDITIONS

__all__ = [
    "DOCUMENT_CONDITIONS",
    "DocumentQueryBuilder",
    "build_document_filter",
    "translate_document",
]

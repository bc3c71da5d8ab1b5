"""MongoDB query document builder from filter descriptors."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ..conditions import FilterCondition, TranslationMode, parse_condition
from ..exceptions import MalformedFilterError, UnsupportedConditionError
from ..model import check_required_parts, coerce_filters, path_for
from ..result import TranslationResult, record_issue
from .operators import (
    DOCUMENT_CONDITIONS,
    compile_date,
    compile_null,
    compile_standard,
    compile_string,
)

logger = logging.getLogger(__name__)

ConditionCompiler = Callable[[str, FilterCondition, Any], "dict[str, Any] | None"]

_COMPILERS: list[ConditionCompiler] = [
    compile_null,
    compile_standard,
    compile_string,
    compile_date,
]


class DocumentQueryBuilder:
    """
    Compiles a filter list into one MongoDB query document.

    Every filter must hold (``$and`` in input order). Filters that are
    malformed or use a condition outside the document vocabulary are
    reported on the result and left out of the query.
    """

    def __init__(
        self,
        compilers: Sequence[ConditionCompiler] | None = None,
        supported_conditions: frozenset[FilterCondition] = DOCUMENT_CONDITIONS,
    ) -> None:
        self._compilers = list(compilers) if compilers is not None else _COMPILERS
        self._supported = supported_conditions

    @property
    def supported_conditions(self) -> frozenset[FilterCondition]:
        return self._supported

    def _compile_leaf(
        self, item_column: str, condition: FilterCondition, value: Any
    ) -> dict[str, Any] | None:
        for compiler in self._compilers:
            compiled = compiler(item_column, condition, value)
            if compiled is not None:
                return compiled
        return None

    def _unsupported(
        self, condition: str, mode: str, index: int
    ) -> UnsupportedConditionError:
        return UnsupportedConditionError(
            condition,
            mode,
            sorted(c.value for c in self._supported),
            path=path_for(index),
        )

    def translate(
        self, filters: Any, *, strict: bool = False
    ) -> TranslationResult[dict[str, Any]]:
        mode = TranslationMode.DOCUMENT.value
        result: TranslationResult[dict[str, Any]] = TranslationResult(query={})
        compiled: list[dict[str, Any]] = []

        for index, item in coerce_filters(filters):
            if isinstance(item, MalformedFilterError):
                record_issue(result, index, item, mode=mode, strict=strict)
                continue

            condition = parse_condition(item.condition)
            malformed = check_required_parts(item, condition, index)
            if malformed is not None:
                record_issue(result, index, malformed, mode=mode, strict=strict)
                continue

            if condition is None or condition not in self._supported:
                record_issue(
                    result,
                    index,
                    self._unsupported(item.condition, mode, index),
                    mode=mode,
                    strict=strict,
                )
                continue

            try:
                leaf = self._compile_leaf(item.column, condition, item.value)
            except ValueError as exc:
                record_issue(
                    result,
                    index,
                    MalformedFilterError(str(exc), path=path_for(index)),
                    mode=mode,
                    strict=strict,
                )
                continue
            if leaf is None:
                record_issue(
                    result,
                    index,
                    self._unsupported(item.condition, mode, index),
                    mode=mode,
                    strict=strict,
                )
                continue
            compiled.append(leaf)

        if compiled:
            result.query = {"$and": compiled}
        logger.debug(
            "Built document filter from %d condition(s), %d skipped",
            len(compiled),
            len(result.issues),
        )
        return result

    def build(self, filters: Any, *, strict: bool = False) -> dict[str, Any]:
        return self.translate(filters, strict=strict).query


_DEFAULT_BUILDER = DocumentQueryBuilder()


def translate_document(
    filters: Any, *, strict: bool = False
) -> TranslationResult[dict[str, Any]]:
    """Translate *filters* into a ``$and`` query plus the skipped entries."""
    return _DEFAULT_BUILDER.translate(filters, strict=strict)


def build_document_filter(filters: Any, *, strict: bool = False) -> dict[str, Any]:
    """Return the MongoDB query for *filters* (``{}`` when nothing survives)."""
    return _DEFAULT_BUILDER.build(filters, strict=strict)

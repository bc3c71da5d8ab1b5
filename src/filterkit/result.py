"""Translation results: the built query plus the filters that were skipped."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .exceptions import MalformedFilterError, UnsupportedConditionError

logger = logging.getLogger(__name__)

QueryT = TypeVar("QueryT")

FilterIssueError = MalformedFilterError | UnsupportedConditionError


@dataclass(frozen=True)
class FilterIssue:
    """One filter that was reported and excluded from the query."""

    index: int
    error: FilterIssueError

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, **self.error.to_dict()}


def default_issues_factory() -> list[FilterIssue]:
    return []


@dataclass
class TranslationResult(Generic[QueryT]):
    """
    Output of a translation call.

    Usage::

        result = translate_document(filters)
        collection.find(result.query)
        for issue in result.issues:
            ...
    """

    query: QueryT
    issues: list[FilterIssue] = field(default_factory=default_issues_factory)

    @property
    def ok(self) -> bool:
        return len(self.issues) == 0

    @property
    def skipped_indices(self) -> list[int]:
        return [issue.index for issue in self.issues]

    def raise_for_issues(self) -> QueryT:
        """Raise the first reported issue, or return the query."""
        if self.issues:
            raise self.issues[0].error
        return self.query

    def __bool__(self) -> bool:
        return self.ok


def record_issue(
    result: TranslationResult[Any],
    index: int,
    error: FilterIssueError,
    *,
    mode: str,
    strict: bool,
) -> None:
    """Attach *error* to *result*, or raise it when *strict* is set."""
    if strict:
        raise error
    logger.warning("Skipping %s filter at index %d: %s", mode, index, error)
    result.issues.append(FilterIssue(index=index, error=error))

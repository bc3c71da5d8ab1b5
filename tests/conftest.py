"""Shared fixtures for filterkit tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def age_and_name_filters():
    """Two SQL filters joined with AND."""
    return [
        {"column": "age", "condition": "greaterThan", "value": 18, "operator": "AND"},
        {"column": "name", "condition": "contains", "value": "an", "operator": "AND"},
    ]

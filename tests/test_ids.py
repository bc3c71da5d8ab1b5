"""Tests for identifier generation."""

from __future__ import annotations

import re
import uuid

import pytest

from filterkit.ids import (
    ALPHANUMERIC,
    RandomIdGenerator,
    UUID4Generator,
    generate_id,
)


def test_random_default_length() -> None:
    value = generate_id("random")
    assert value is not None
    assert len(value) == 10
    assert set(value) <= set(ALPHANUMERIC)


def test_random_custom_length() -> None:
    assert re.fullmatch(r"[A-Za-z0-9]{32}", generate_id("random", 32) or "")
    assert generate_id("random", 0) == ""


def test_uuid_is_version_4() -> None:
    value = generate_id("uuid")
    assert value is not None
    assert uuid.UUID(value).version == 4


def test_unknown_type_returns_none() -> None:
    assert generate_id("snowflake") is None


def test_generators() -> None:
    assert len(RandomIdGenerator(5).next_id()) == 5
    assert UUID4Generator().next_id() != UUID4Generator().next_id()
    with pytest.raises(ValueError):
        RandomIdGenerator(-1)

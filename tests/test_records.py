"""Tests for in-memory record helpers."""

from __future__ import annotations

import pytest

from filterkit.exceptions import InvalidInputError
from filterkit.records import create_data, delete_data, get_unique_values, update_data


@pytest.fixture
def people() -> list[dict]:
    return [
        {"id": "1", "name": "Ann", "city": "Oslo"},
        {"id": "2", "name": "Bob", "city": "Rome"},
        {"id": "3", "name": "Cid", "city": "Oslo"},
    ]


def test_unique_values_keep_first_seen_order(people) -> None:
    assert get_unique_values(people, "city") == ["Oslo", "Rome"]


def test_unique_values_missing_field(people) -> None:
    assert get_unique_values([*people, {"id": "4"}], "city") == ["Oslo", "Rome", None]


def test_unique_values_unhashable() -> None:
    data = [{"tags": ["a"]}, {"tags": ["a"]}, {"tags": ["b"]}]
    assert get_unique_values(data, "tags") == [["a"], ["b"]]


def test_unique_values_rejects_bad_input(people) -> None:
    with pytest.raises(InvalidInputError):
        get_unique_values("people", "city")
    with pytest.raises(InvalidInputError):
        get_unique_values(people, 3)


def test_create_returns_new_list(people) -> None:
    created = create_data(people, {"id": "4", "name": "Dee"})
    assert created[-1] == {"id": "4", "name": "Dee"}
    assert len(people) == 3


def test_create_requires_mapping(people) -> None:
    with pytest.raises(InvalidInputError):
        create_data(people, "Dee")


def test_update_merges_matching_record(people) -> None:
    updated = update_data(people, "2", {"city": "Milan"})
    assert updated[1] == {"id": "2", "name": "Bob", "city": "Milan"}
    assert people[1]["city"] == "Rome"
    assert updated[0] is people[0]


def test_update_unknown_id_is_a_copy(people) -> None:
    updated = update_data(people, "99", {"city": "Milan"})
    assert updated == people
    assert updated is not people


def test_update_rejects_bad_input(people) -> None:
    with pytest.raises(InvalidInputError):
        update_data(None, "1", {})
    with pytest.raises(InvalidInputError):
        update_data(people, "1", ["city"])


def test_delete(people) -> None:
    assert [p["id"] for p in delete_data(people, "1")] == ["2", "3"]
    assert delete_data(people, "99") == people
    with pytest.raises(InvalidInputError):
        delete_data({"id": "1"}, "1")


def test_unique_values_keep_types_apart() -> None:
    data = [{"v": 1}, {"v": True}, {"v": 1.0}, {"v": 1}]
    unique = get_unique_values(data, "v")
    assert [type(v) for v in unique] == [int, bool, float]


def test_unique_values_unhashable_keep_types_apart() -> None:
    data = [{"v": [1]}, {"v": [1]}, {"v": {"a": 1}}, {"v": {"a": 1}}]
    assert get_unique_values(data, "v") == [[1], {"a": 1}]


def test_update_skips_non_mapping_records() -> None:
    updated = update_data([{"id": None}, "x"], None, {"a": 1})
    assert updated == [{"id": None, "a": 1}, "x"]

from __future__ import annotations

from statemgmt.path import resolve_container, split_path


def test_split_path() -> None:
    assert split_path("address.city") == ("address", "city")
    assert split_path("name") == ("name",)
    assert split_path("") == ("",)


def test_resolve_container_returns_parent_of_last_segment() -> None:
    root = {"a": {"b": {"c": 1}}}

    container = resolve_container(root, ("a", "b", "c"))

    assert container is root["a"]["b"]


def test_resolve_container_single_segment_returns_root() -> None:
    root = {"a": 1}
    assert resolve_container(root, ("a",)) is root


def test_resolve_container_missing_intermediate() -> None:
    assert resolve_container({"a": {}}, ("a", "missing", "b")) is None
    assert resolve_container({"a": None}, ("a", "b")) is None


def test_resolve_container_non_mapping_intermediate() -> None:
    assert resolve_container({"a": [1, 2]}, ("a", "0")) is None
    assert resolve_container({"a": "text"}, ("a", "b", "c")) is None
    assert resolve_container([1], ("0",)) is None

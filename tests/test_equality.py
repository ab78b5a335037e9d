from __future__ import annotations

import pytest

from statemgmt.equality import fresh_copy, mappings_equal, needs_update, sequences_equal, shares_container_shape


def test_sequences_equal_checks_length_then_elements() -> None:
    assert sequences_equal([1, 2, 3], [1, 2, 3])
    assert not sequences_equal([1, 2], [1, 2, 3])
    assert not sequences_equal([1, 2, 3], [1, 3, 2])


def test_symmetric_mapping_comparison_detects_swapped_keys() -> None:
    assert mappings_equal({"a": 1}, {"a": 1})
    assert not mappings_equal({"a": None}, {"b": None})
    assert not mappings_equal({"a": 1}, {"a": 1, "b": 2})


def test_legacy_mapping_comparison_reads_missing_keys_as_none() -> None:
    assert mappings_equal({"a": None}, {"b": 1}, symmetric=False)
    assert not mappings_equal({"a": 1}, {"b": 1}, symmetric=False)


def test_nested_containers_compare_with_native_equality() -> None:
    assert sequences_equal([{"x": [1]}], [{"x": [1]}])
    assert not mappings_equal({"a": {"b": 1}}, {"a": {"b": 2}})


@pytest.mark.parametrize(
    ("current", "new", "expected"),
    [
        ([1, 2], [1, 2], False),
        ([1, 2], (1, 2), False),
        ([1, 2], [2, 1], True),
        ({"a": 1}, {"a": 1}, False),
        ({"a": 1}, {"a": 2}, True),
        ([1], "1", True),
        (None, None, False),
        (None, 0, True),
        ("x", "x", False),
        (1, 1.0, False),
    ],
)
def test_needs_update(current: object, new: object, expected: bool) -> None:
    assert needs_update(current, new) is expected


def test_fresh_copy_is_shallow() -> None:
    inner = {"b": 1}
    original = {"a": inner}

    copied = fresh_copy(original)

    assert copied == original
    assert copied is not original
    assert copied["a"] is inner
    assert fresh_copy((1, 2)) == [1, 2]
    assert fresh_copy("text") == "text"


def test_shares_container_shape() -> None:
    assert shares_container_shape([1], (2,))
    assert shares_container_shape({}, {"a": 1})
    assert not shares_container_shape([1], {"a": 1})
    assert not shares_container_shape("ab", ["a", "b"])

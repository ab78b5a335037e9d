"""Change-detection policy for synchronous updates.

Comparison is shallow: immediate elements are compared with their own
``==``, nested containers are never walked by this module.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from statemgmt.values import is_mapping_value, is_sequence_value


def sequences_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    if len(a) != len(b):
        return False
    return all(left == right for left, right in zip(a, b, strict=True))


def mappings_equal(a: Mapping[Any, Any], b: Mapping[Any, Any], *, symmetric: bool = True) -> bool:
    """Compare two mappings key by key.

    With ``symmetric=False`` a key of *a* missing from *b* is looked up as
    ``None``, so ``{"x": None}`` equals ``{"y": 1}``. This matches the legacy
    behavior and is kept available for exact parity.
    """
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if symmetric:
            if key not in b or b[key] != value:
                return False
        elif b.get(key) != value:
            return False
    return True


def needs_update(current: Any, new: Any, *, symmetric_maps: bool = True) -> bool:
    """Decide whether *new* replaces *current* on the synchronous path."""
    if is_sequence_value(current) and is_sequence_value(new):
        return not sequences_equal(current, new)
    if is_mapping_value(current) and is_mapping_value(new):
        return not mappings_equal(current, new, symmetric=symmetric_maps)
    return bool(current != new)


def fresh_copy(value: Any) -> Any:
    """Shallow copy for list/map values; other values are returned as is."""
    if is_sequence_value(value):
        return list(value)
    if is_mapping_value(value):
        return dict(value)
    return value


def shares_container_shape(a: Any, b: Any) -> bool:
    """Return ``True`` when both values are sequences or both are mappings."""
    if is_sequence_value(a) and is_sequence_value(b):
        return True
    return is_mapping_value(a) and is_mapping_value(b)

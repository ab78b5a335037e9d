"""Value shapes held by the store.

A slot can hold a primitive, an ordered sequence or a string-keyed mapping,
and may change shape between updates.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

StateValue: TypeAlias = None | bool | int | float | str | list["StateValue"] | dict[str, "StateValue"]
"""Variant type of everything a slot may contain."""


def is_sequence_value(value: Any) -> bool:
    """Return ``True`` for ordered sequences (never ``str``/``bytes``)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_mapping_value(value: Any) -> bool:
    return isinstance(value, Mapping)

"""Dotted-path access into nested mapping values."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

PATH_SEPARATOR = "."


def split_path(path: str) -> tuple[str, ...]:
    """Split ``"a.b.c"`` into ``("a", "b", "c")``.

    An empty path yields a single empty segment, addressing the ``""`` key.
    """
    return tuple(path.split(PATH_SEPARATOR))


def resolve_container(root: Any, segments: tuple[str, ...]) -> MutableMapping[str, Any] | None:
    """Walk every segment but the last and return the container to write into.

    Returns ``None`` when an intermediate is missing, ``None`` or not a
    mapping, or when the final container cannot be assigned to.
    """
    current: Any = root
    for segment in segments[:-1]:
        if not isinstance(current, MutableMapping):
            return None
        current = current.get(segment)
        if current is None:
            return None
    if not isinstance(current, MutableMapping):
        return None
    return current

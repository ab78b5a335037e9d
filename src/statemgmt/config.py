"""Store configuration for statemgmt."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Store behavior switches.

    Parameters
    ----------
    symmetric_map_equality : bool
        Compare mappings in both directions on the synchronous update
        path.  Set to ``False`` for the legacy one-directional check,
        where a key missing from the new mapping reads as ``None``.
    require_initialized : bool
        Reject sync/async updates on keys that were never initialized
        with :class:`~statemgmt.exceptions.StateNotInitializedError`.
        Defaults to ``False``: the first update creates the key.
    copy_on_update : bool
        Store a fresh shallow copy when a list or mapping replaces a
        list or mapping.
    log_values : bool
        Include (redacted) values in DEBUG log lines.
    """

    symmetric_map_equality: bool = True
    require_initialized: bool = False
    copy_on_update: bool = True
    log_values: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from ``STATEMGMT_*`` environment variables.

        Explicit keyword arguments override environment values.
        Unparseable values fall back to the field default.
        """
        env = os.environ
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_key = f"STATEMGMT_{field.name.upper()}"
            kwargs[field.name] = _env_bool(env.get(env_key), field.default)
        kwargs.update(overrides)
        return cls(**kwargs)

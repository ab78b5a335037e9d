"""Custom exception hierarchy for statemgmt."""

from __future__ import annotations


class StateError(Exception):
    """Base exception for all statemgmt errors."""


class StateConfigError(StateError):
    """Invalid store configuration."""


class StateNotInitializedError(StateError, KeyError):
    """Update targeted a key that was never initialized.

    Only raised when the store runs with ``require_initialized=True``.
    The default store creates the key implicitly on first update.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"state key {key!r} has not been initialized")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])

"""Diagnostic events emitted by the store.

The store never raises on a rejected operation; these events are the
optional signal that tells a caller what happened and why.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreOperation(StrEnum):
    INIT = "init"
    UPDATE = "update"
    UPDATE_ASYNC = "update_async"
    UPDATE_NESTED = "update_nested"
    RESET = "reset"
    LISTENER_ADDED = "listener_added"
    LISTENER_REMOVED = "listener_removed"


class SkipReason(StrEnum):
    ALREADY_INITIALIZED = "already_initialized"
    UNCHANGED = "unchanged"
    NOT_INITIALIZED = "not_initialized"
    NOT_A_MAPPING = "not_a_mapping"
    INVALID_PATH = "invalid_path"
    NO_LISTENER = "no_listener"


class StoreEvent(BaseModel):
    """One store operation and its outcome."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="State key the operation targeted")
    operation: StoreOperation
    applied: bool = Field(..., description="False when the operation was a no-op")
    reason: SkipReason | None = None
    path: str | None = Field(default=None, description="Dotted path for nested updates")
    notified: bool = Field(default=False, description="Whether a listener was invoked")
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

"""Observable in-memory key-value state store.

Each key addresses one slot: a value plus at most one listener. Mutations
that change a slot's value call its listener synchronously before the
mutating call returns.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from statemgmt._redact import redact_for_log
from statemgmt.config import StoreConfig
from statemgmt.equality import fresh_copy, needs_update, shares_container_shape
from statemgmt.events import SkipReason, StoreEvent, StoreOperation
from statemgmt.exceptions import StateConfigError, StateNotInitializedError
from statemgmt.path import resolve_container, split_path
from statemgmt.values import StateValue, is_mapping_value

_logger = logging.getLogger(__name__)

Listener: TypeAlias = Callable[[], object]
EventCallback: TypeAlias = Callable[[StoreEvent], None]


class StateStore:
    """Keyed state slots with change notification.

    Parameters
    ----------
    config : StoreConfig or None
        Behavior switches.  Defaults to :class:`StoreConfig` defaults.
    on_event : callable or None
        Diagnostic hook receiving a :class:`StoreEvent` for every
        operation, including the ones that turned out to be no-ops.

    The store follows a silent no-op policy: updating a nested path that
    does not exist, resetting a key that was never initialized or
    removing a missing listener does nothing.  Listener exceptions
    propagate to the caller after the new value has been stored.

    ``update_state_async`` does not serialize against other updates to the
    same key: whichever pending value resolves last wins.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        on_event: EventCallback | None = None,
    ) -> None:
        if config is None:
            config = StoreConfig()
        if not isinstance(config, StoreConfig):
            raise StateConfigError(f"config must be a StoreConfig, got {type(config).__name__}")
        self._config = config
        self._on_event = on_event
        self._values: dict[str, Any] = {}
        self._listeners: dict[str, Listener] = {}
        # Guards both mappings; callbacks always run outside it.
        self._lock = threading.Lock()

    @property
    def config(self) -> StoreConfig:
        return self._config

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def init_state(self, key: str, initial_value: StateValue) -> None:
        """Set *key* to *initial_value* unless the key already exists.

        Initialization never notifies the listener.
        """
        with self._lock:
            created = key not in self._values
            if created:
                self._values[key] = initial_value
        self._finish(
            key,
            StoreOperation.INIT,
            applied=created,
            reason=None if created else SkipReason.ALREADY_INITIALIZED,
            value=initial_value,
        )

    def get_state(self, key: str, default: Any = None) -> Any:
        """Return the stored value for *key*, or *default* if it was never set.

        The stored object itself is returned; mutate it only through
        :meth:`update_nested_state`.
        """
        return self._values.get(key, default)

    def update_state_sync(self, key: str, new_value: StateValue) -> None:
        """Replace the value of *key* and notify, unless nothing changed.

        Lists are compared element by element, mappings key by key and
        everything else with ``!=``.  A first update on an unknown key
        creates it, unless the store requires initialization.
        """
        with self._lock:
            self._check_initialized(key)
            current = self._values.get(key)
            changed = needs_update(current, new_value, symmetric_maps=self._config.symmetric_map_equality)
            if changed:
                if self._config.copy_on_update and shares_container_shape(current, new_value):
                    new_value = fresh_copy(new_value)
                self._values[key] = new_value
        self._finish(
            key,
            StoreOperation.UPDATE,
            applied=changed,
            reason=None if changed else SkipReason.UNCHANGED,
            value=new_value,
            notify=changed,
        )

    async def update_state_async(self, key: str, pending_value: Awaitable[StateValue]) -> None:
        """Await *pending_value*, then store it if it differs from the current value.

        Comparison is plain ``!=`` regardless of shape.  The current value
        is read after the await, so an intervening update is overwritten.
        """
        resolved = await pending_value
        with self._lock:
            self._check_initialized(key)
            changed = bool(self._values.get(key) != resolved)
            if changed:
                self._values[key] = resolved
        self._finish(
            key,
            StoreOperation.UPDATE_ASYNC,
            applied=changed,
            reason=None if changed else SkipReason.UNCHANGED,
            value=resolved,
            notify=changed,
        )

    def update_nested_state(self, parent_key: str, path: str, new_value: StateValue) -> None:
        """Assign *new_value* inside the mapping stored at *parent_key*.

        *path* is dot separated, e.g. ``"address.city"``.  The nested
        container is mutated in place and the parent's listener is always
        notified on success.  A parent that is not a mapping, or a path
        through a missing or non-mapping intermediate, is a no-op.
        """
        reason: SkipReason | None = None
        with self._lock:
            parent = self._values.get(parent_key)
            if not is_mapping_value(parent):
                reason = SkipReason.NOT_A_MAPPING
            else:
                segments = split_path(path)
                container = resolve_container(parent, segments)
                if container is None:
                    reason = SkipReason.INVALID_PATH
                else:
                    container[segments[-1]] = new_value
        applied = reason is None
        self._finish(
            parent_key,
            StoreOperation.UPDATE_NESTED,
            applied=applied,
            reason=reason,
            path=path,
            value=new_value,
            notify=applied,
        )

    def reset_state(self, key: str, default_value: StateValue = None) -> None:
        """Set an initialized *key* back to *default_value* and always notify.

        Keys that were never initialized are left alone.
        """
        with self._lock:
            present = key in self._values
            if present:
                self._values[key] = default_value
        self._finish(
            key,
            StoreOperation.RESET,
            applied=present,
            reason=None if present else SkipReason.NOT_INITIALIZED,
            value=default_value,
            notify=present,
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, key: str, callback: Listener) -> Callable[[], None]:
        """Register *callback* as the listener for *key*.

        A key holds one listener; registering again replaces the previous
        one.  The returned handle removes *callback* only while it is still
        the registered listener.
        """
        with self._lock:
            self._listeners[key] = callback
        self._finish(key, StoreOperation.LISTENER_ADDED, applied=True)

        def _unsubscribe() -> None:
            with self._lock:
                removed = self._listeners.get(key) is callback
                if removed:
                    del self._listeners[key]
            if removed:
                self._finish(key, StoreOperation.LISTENER_REMOVED, applied=True)

        return _unsubscribe

    def remove_listener(self, key: str) -> None:
        with self._lock:
            removed = self._listeners.pop(key, None) is not None
        self._finish(
            key,
            StoreOperation.LISTENER_REMOVED,
            applied=removed,
            reason=None if removed else SkipReason.NO_LISTENER,
        )

    def has_listener(self, key: str) -> bool:
        return key in self._listeners

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> list[str]:
        """Keys present when called, in insertion order."""
        with self._lock:
            return list(self._values)

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of every slot value."""
        with self._lock:
            return copy.deepcopy(self._values)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_initialized(self, key: str) -> None:
        if self._config.require_initialized and key not in self._values:
            raise StateNotInitializedError(key)

    def _finish(
        self,
        key: str,
        operation: StoreOperation,
        *,
        applied: bool,
        reason: SkipReason | None = None,
        path: str | None = None,
        value: Any = None,
        notify: bool = False,
    ) -> None:
        listener: Listener | None = None
        if notify:
            with self._lock:
                listener = self._listeners.get(key)

        if self._config.log_values:
            _logger.debug(
                "%s key=%s path=%s applied=%s reason=%s value=%s",
                operation,
                key,
                path,
                applied,
                reason,
                redact_for_log(value),
            )
        else:
            _logger.debug("%s key=%s path=%s applied=%s reason=%s", operation, key, path, applied, reason)

        if self._on_event is not None:
            try:
                event = StoreEvent(
                    key=key,
                    operation=operation,
                    applied=applied,
                    reason=reason,
                    path=path,
                    notified=listener is not None,
                )
                self._on_event(event)
            except Exception:
                _logger.debug("on_event callback failed", exc_info=True)

        if listener is not None:
            listener()

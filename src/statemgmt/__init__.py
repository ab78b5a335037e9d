"""statemgmt - Observable in-process key-value state for UI rendering."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("statemgmt")
except PackageNotFoundError:
    __version__ = "0+local"
from statemgmt.config import StoreConfig
from statemgmt.events import SkipReason, StoreEvent, StoreOperation
from statemgmt.exceptions import StateConfigError, StateError, StateNotInitializedError
from statemgmt.store import Listener, StateStore
from statemgmt.values import StateValue

__all__ = [
    "__version__",
    "Listener",
    "SkipReason",
    "StateConfigError",
    "StateError",
    "StateNotInitializedError",
    "StateStore",
    "StateValue",
    "StoreConfig",
    "StoreEvent",
    "StoreOperation",
]

"""Mini README: Load/save adapter between widget state and storage.

Structure:
    * LEDGER_STORAGE_KEY / COUNTER_STORAGE_KEY - fixed keys per widget.
    * StatePersistence - ``load()`` and ``save(state)`` for one state type.

Persistence is best-effort. ``load`` falls back to a fresh state whenever
nothing is stored or the blob cannot be decoded, and ``save`` reports
failure through the log and its return value. Neither raises, so storage
trouble can never stop the widget from rendering.
"""

from __future__ import annotations

import json
from typing import Any, Generic, Type, TypeVar

from ..ledger import CounterState, LedgerState
from ..logging_utils import get_logger
from .storage import KeyValueStorage, StorageError

LOGGER = get_logger(__name__)

LEDGER_STORAGE_KEY = "moneycount::data"
COUNTER_STORAGE_KEY = "moneycount::counter"

StateT = TypeVar("StateT", LedgerState, CounterState)


class StatePersistence(Generic[StateT]):
    """Persist one widget's state as a JSON blob under a fixed key."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        state_type: Type[StateT] = LedgerState,
        key: str = LEDGER_STORAGE_KEY,
    ) -> None:
        self.storage = storage
        self.state_type = state_type
        self.key = key

    def load(self) -> StateT:
        """Return the stored state, or a fresh one if absent or unreadable."""

        try:
            blob = self.storage.get_item(self.key)
        except StorageError as error:
            LOGGER.warning("Storage unavailable for '%s', starting fresh: %s", self.key, error)
            return self.state_type.initial()
        if blob is None:
            LOGGER.info("No stored state under '%s', starting fresh", self.key)
            return self.state_type.initial()
        try:
            state = self.state_type.from_dict(json.loads(blob))
        except (ValueError, RecursionError) as error:
            LOGGER.warning("Discarding unreadable state under '%s': %s", self.key, error)
            return self.state_type.initial()
        LOGGER.info("Restored %s entries from '%s'", len(state.entries), self.key)
        return state

    def save(self, state: StateT) -> bool:
        """Write ``state``; returns ``False`` and logs when storage fails."""

        try:
            blob = encode_state(state)
            self.storage.set_item(self.key, blob)
        except (StorageError, TypeError, ValueError) as error:
            LOGGER.error("Could not write state under '%s': %s", self.key, error)
            return False
        return True


def encode_state(state: Any) -> str:
    return json.dumps(state.as_dict())

"""Mini README: Host runtime owning the current widget state.

Structure:
    * LedgerRuntime - holds the single mutable state cell for one widget,
      loads it once on construction and saves after every dispatch.
    * ledger_runtime / counter_runtime - factories wiring the right
      transition function and storage key.

The transition functions are pure; this is the only place where the
"current state" is replaced. Dispatches are serialised with a lock because
the web server may call into the runtime from several worker threads.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

from .ledger import CounterState, LedgerState, transition, transition_counter
from .logging_utils import get_logger
from .persistence import (
    COUNTER_STORAGE_KEY,
    LEDGER_STORAGE_KEY,
    KeyValueStorage,
    StatePersistence,
)

LOGGER = get_logger(__name__)

StateT = TypeVar("StateT")


class LedgerRuntime(Generic[StateT]):
    """Apply messages to the current state and persist the result."""

    def __init__(
        self,
        persistence: StatePersistence,
        transition_fn: Callable[[StateT, object], StateT],
    ) -> None:
        self._persistence = persistence
        self._transition = transition_fn
        self._lock = threading.Lock()
        self._state: StateT = persistence.load()

    @property
    def state(self) -> StateT:
        return self._state

    def dispatch(self, message: object) -> StateT:
        """Run one transition, save best-effort and return the new state."""

        with self._lock:
            next_state = self._transition(self._state, message)
            self._state = next_state
            if not self._persistence.save(next_state):
                LOGGER.warning("State kept in memory only after %s", type(message).__name__)
        return next_state


def ledger_runtime(storage: KeyValueStorage) -> LedgerRuntime[LedgerState]:
    persistence = StatePersistence(storage, state_type=LedgerState, key=LEDGER_STORAGE_KEY)
    return LedgerRuntime(persistence, transition)


def counter_runtime(storage: KeyValueStorage) -> LedgerRuntime[CounterState]:
    persistence = StatePersistence(storage, state_type=CounterState, key=COUNTER_STORAGE_KEY)
    return LedgerRuntime(persistence, transition_counter)

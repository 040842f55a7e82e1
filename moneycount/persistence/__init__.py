"""Mini README: Persistence for widget state.

Exports the key/value storage backends and the ``StatePersistence``
adapter that loads and saves a whole state under a fixed key.
"""

from .adapter import COUNTER_STORAGE_KEY, LEDGER_STORAGE_KEY, StatePersistence
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage, StorageError

__all__ = [
    "COUNTER_STORAGE_KEY",
    "LEDGER_STORAGE_KEY",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StatePersistence",
    "StorageError",
]

"""Mini README: Key/value storage backends for persisted widget state.

Structure:
    * StorageError - raised by backends when the medium cannot be used.
    * KeyValueStorage - protocol with ``get_item``/``set_item``.
    * MemoryStorage - dict-backed backend for tests and ephemeral sessions.
    * JsonFileStorage - single JSON object file mapping keys to text blobs.

The interface mirrors browser local storage: string keys, string values,
``None`` for absent keys. Backends do not interpret the blobs they hold.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(Exception):
    """The storage medium could not be read or written."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage; contents vanish with the process."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """Store every key in one JSON document on disk.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash mid-write leaves the previous document intact.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        LOGGER.debug("JSON storage bound to %s", self.path)

    def _read_document(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as error:
            raise StorageError(f"Could not read storage file {self.path}: {error}") from error
        if not isinstance(document, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object.")
        return document

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_document().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Value stored under '{key}' is not text.")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            document = self._read_document()
        except StorageError as error:
            LOGGER.warning("Replacing unreadable storage file: %s", error)
            document = {}
        document[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
                    json.dump(document, temp_file, indent=2, sort_keys=True)
                os.replace(temp_name, self.path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise StorageError(f"Could not write storage file {self.path}: {error}") from error

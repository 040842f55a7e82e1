"""Mini README: Tests for storage backends and the state persistence adapter.

Structure:
    * round trips through memory and JSON file storage.
    * fresh-state fallbacks for absent, corrupt and wrongly shaped blobs.
    * save failures reported through the return value, never raised.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pytest

from moneycount.ledger import Column, CounterState, Entry, LedgerState
from moneycount.persistence import (
    COUNTER_STORAGE_KEY,
    LEDGER_STORAGE_KEY,
    JsonFileStorage,
    MemoryStorage,
    StatePersistence,
    StorageError,
)


class BrokenStorage:
    """Storage whose medium is unavailable."""

    def get_item(self, key: str) -> Optional[str]:
        raise StorageError("storage disabled")

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("quota exceeded")


def _sample_state() -> LedgerState:
    return LedgerState(
        entries=(
            Entry(id=0, description="10", column=Column.LEFT),
            Entry(id=1, description="abc", column=Column.RIGHT, editing=True),
        ),
        pending_value="7",
        pending_column=Column.RIGHT,
        next_id=2,
        rate=2.5,
    )


def test_memory_round_trip_restores_full_state() -> None:
    storage = MemoryStorage()
    persistence = StatePersistence(storage)

    assert persistence.save(_sample_state()) is True
    assert persistence.load() == _sample_state()


def test_json_file_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "moneycount.json"
    persistence = StatePersistence(JsonFileStorage(path))

    persistence.save(_sample_state())

    document = json.loads(path.read_text(encoding="utf-8"))
    assert set(document) == {LEDGER_STORAGE_KEY}
    assert StatePersistence(JsonFileStorage(path)).load() == _sample_state()


def test_ledger_and_counter_share_one_file(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "moneycount.json")
    ledger = StatePersistence(storage)
    counter = StatePersistence(storage, state_type=CounterState, key=COUNTER_STORAGE_KEY)

    ledger.save(_sample_state())
    counter.save(CounterState(next_id=9))

    assert ledger.load() == _sample_state()
    assert counter.load() == CounterState(next_id=9)


def test_loads_blob_written_by_browser_widget() -> None:
    blob = (
        '{"entries":[{"description":"10","column":"Left","editing":false,"id":0}],'
        '"value":"","column":"Right","uid":1,"l2r_rate":5}'
    )
    storage = MemoryStorage({LEDGER_STORAGE_KEY: blob})

    state = StatePersistence(storage).load()

    assert state.entries == (Entry(id=0, description="10", column=Column.LEFT),)
    assert state.pending_column is Column.RIGHT
    assert state.next_id == 1
    assert state.rate == 5.0


def test_missing_blob_yields_initial_state() -> None:
    assert StatePersistence(MemoryStorage()).load() == LedgerState.initial()


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        "[]",
        '{"entries": [], "value": "", "column": "Left", "l2r_rate": 5.35}',
        '{"entries": [], "value": "", "column": "Up", "uid": 0, "l2r_rate": 5.35}',
        '{"entries": [{"id": -1}], "value": "", "column": "Left", "uid": 0, "l2r_rate": 1}',
        '{"entries": [], "value": "", "column": "Left", "uid": true, "l2r_rate": 5.35}',
    ],
)
def test_unreadable_blob_yields_initial_state(blob: str) -> None:
    storage = MemoryStorage({LEDGER_STORAGE_KEY: blob})

    assert StatePersistence(storage).load() == LedgerState.initial()


def test_unavailable_storage_never_raises() -> None:
    persistence = StatePersistence(BrokenStorage())

    assert persistence.load() == LedgerState.initial()
    assert persistence.save(_sample_state()) is False


def test_corrupt_file_is_reported_then_replaced(tmp_path: Path) -> None:
    path = tmp_path / "moneycount.json"
    path.write_text("{broken", encoding="utf-8")
    storage = JsonFileStorage(path)

    with pytest.raises(StorageError):
        storage.get_item(LEDGER_STORAGE_KEY)

    storage.set_item(LEDGER_STORAGE_KEY, "{}")
    assert storage.get_item(LEDGER_STORAGE_KEY) == "{}"


def test_deeply_nested_blob_yields_initial_state(tmp_path: Path) -> None:
    """Pathologically nested JSON falls back to a fresh state for every backend."""

    blob = "[" * 200000
    memory = StatePersistence(MemoryStorage({LEDGER_STORAGE_KEY: blob}))
    path = tmp_path / "moneycount.json"
    path.write_text(blob, encoding="utf-8")
    on_disk = StatePersistence(JsonFileStorage(path))

    assert memory.load() == LedgerState.initial()
    assert on_disk.load() == LedgerState.initial()
    assert on_disk.save(_sample_state()) is True
    assert on_disk.load() == _sample_state()

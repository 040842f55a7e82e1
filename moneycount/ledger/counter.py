"""Mini README: Counter variant of the ledger without currency conversion.

Structure:
    * CounterState - entries and draft only; no exchange rate.
    * transition_counter - same messages as ``transition``; rate updates are ignored.
    * column_count / compute_counts - per-column entry counts for the footer.

This variant predates the dual-currency widget. It keeps the entry handling
(ids, drafts, in-place edits) and replaces numeric aggregation with plain
counts of how many entries sit in each column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..logging_utils import get_logger
from .messages import Add, Noop, UpdateDraft, UpdateEntry, UpdateRate
from .model import Column, Entry, entries_from_payload, require_count, require_field
from .transition import append_draft, update_draft, update_entries

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CounterState:
    """Complete state of the counter widget."""

    entries: Tuple[Entry, ...] = ()
    pending_value: str = ""
    pending_column: Column = Column.LEFT
    next_id: int = 0

    @classmethod
    def initial(cls) -> "CounterState":
        return cls()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.as_dict() for entry in self.entries],
            "value": self.pending_value,
            "column": self.pending_column.value,
            "uid": self.next_id,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CounterState":
        if not isinstance(payload, Mapping):
            raise ValueError("Counter payload must be an object.")
        return cls(
            entries=entries_from_payload(payload),
            pending_value=require_field(payload, "value", str),
            pending_column=Column.from_str(require_field(payload, "column", str)),
            next_id=require_count(payload, "uid"),
        )


def transition_counter(state: CounterState, message: object) -> CounterState:
    """Counter counterpart of ``transition``; ``UpdateRate`` has nothing to act on."""

    if isinstance(message, Add):
        return append_draft(state)
    if isinstance(message, UpdateDraft):
        return update_draft(state, message)
    if isinstance(message, UpdateEntry):
        return update_entries(state, message)
    if not isinstance(message, (Noop, UpdateRate)):
        LOGGER.debug("Ignoring unsupported message %r", message)
    return state


def column_count(entries: Iterable[Entry], column: Column) -> int:
    return sum(1 for entry in entries if entry.column is column)


def compute_counts(state: CounterState) -> Dict[str, int]:
    """Footer figures for the counter widget."""

    return {
        "entry_count": len(state.entries),
        "left_count": column_count(state.entries, Column.LEFT),
        "right_count": column_count(state.entries, Column.RIGHT),
    }

"""Mini README: Pure transition function for the dual-currency ledger.

Structure:
    * transition - maps ``(LedgerState, message)`` to the next state.
    * append_draft / update_entries / update_draft - helpers shared with the
      counter variant, which has the same entry-handling fields.

No function here performs I/O or mutates its input. Saving the resulting
state is the runtime's job.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from ..logging_utils import get_logger
from .messages import Add, Noop, UpdateDraft, UpdateEntry, UpdateRate
from .model import Entry, LedgerState, parse_rate

LOGGER = get_logger(__name__)

StateT = TypeVar("StateT")


def append_draft(state: StateT) -> StateT:
    """Turn the draft into a new entry; empty drafts are accepted as-is."""

    entry = Entry(
        id=state.next_id,
        description=state.pending_value,
        column=state.pending_column,
    )
    return replace(
        state,
        entries=state.entries + (entry,),
        next_id=state.next_id + 1,
        pending_value="",
    )


def update_draft(state: StateT, message: UpdateDraft) -> StateT:
    return replace(state, pending_value=message.text, pending_column=message.column)


def update_entries(state: StateT, message: UpdateEntry) -> StateT:
    """Rewrite every entry carrying ``message.entry_id``.

    Ids are unique in a healthy store, but a corrupted blob may hold
    duplicates; all of them are updated the same way. Unknown ids leave the
    state untouched.
    """

    if not any(entry.id == message.entry_id for entry in state.entries):
        LOGGER.debug("Ignoring update for unknown entry %s", message.entry_id)
        return state
    entries = tuple(
        replace(entry, description=message.text, column=message.column)
        if entry.id == message.entry_id
        else entry
        for entry in state.entries
    )
    return replace(state, entries=entries)


def transition(state: LedgerState, message: object) -> LedgerState:
    """Return the state that follows ``state`` after ``message``.

    Total over every input: unknown messages and ``Noop`` return ``state``
    itself. A rate that fails to parse resets to the default rate instead of
    keeping the previous one.
    """

    if isinstance(message, Add):
        next_state = append_draft(state)
        LOGGER.debug(
            "Added entry %s in %s column", state.next_id, state.pending_column.value
        )
        return next_state
    if isinstance(message, UpdateDraft):
        return update_draft(state, message)
    if isinstance(message, UpdateEntry):
        return update_entries(state, message)
    if isinstance(message, UpdateRate):
        rate = parse_rate(message.text)
        LOGGER.debug("Rate set to %s from %r", rate, message.text)
        return replace(state, rate=rate)
    if not isinstance(message, Noop):
        LOGGER.debug("Ignoring unsupported message %r", message)
    return state

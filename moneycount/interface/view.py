"""Mini README: Render projections and event mapping for the widgets.

Structure:
    * build_ledger_view - dual-currency state to a template-friendly dict.
    * build_counter_view - counter state to the same layout without rates.
    * message_for_keypress / message_for_input / message_for_event - turn
      browser interactions into ledger messages.

Views are plain dictionaries so the same projection feeds the Jinja
template and the JSON API. Building a view has no side effects and may be
repeated any number of times for the same state.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..configuration import MoneycountSettings
from ..ledger import (
    Add,
    Column,
    CounterState,
    LedgerState,
    Message,
    Noop,
    UpdateDraft,
    UpdateEntry,
    UpdateRate,
    compute_counts,
    compute_totals,
    convert,
    format_amount,
    format_rate,
)

LEDGER_TITLE = "Dual Count"
COUNTER_TITLE = "Count"


def _draft_fields(state: Any) -> Dict[str, str]:
    """Only the column the draft targets shows its text; the other stays empty."""

    return {
        "left": state.pending_value if state.pending_column is Column.LEFT else "",
        "right": state.pending_value if state.pending_column is Column.RIGHT else "",
    }


def _labels(settings: MoneycountSettings) -> Dict[str, str]:
    return {"left": settings.left_currency, "right": settings.right_currency}


def build_ledger_view(state: LedgerState, settings: MoneycountSettings) -> Dict[str, Any]:
    """Project the dual-currency state into rows, draft fields and a summary."""

    rows: List[Dict[str, Any]] = []
    for entry in state.entries:
        left_value, right_value = convert(entry, state.rate)
        rows.append(
            {
                "id": entry.id,
                "left": format_amount(left_value),
                "right": format_amount(right_value),
                "column": entry.column.value,
                "editing": entry.editing,
            }
        )
    totals = compute_totals(state)
    return {
        "variant": "ledger",
        "title": LEDGER_TITLE,
        "labels": _labels(settings),
        "rows": rows,
        "draft": _draft_fields(state),
        "summary": {
            "entry_count": totals.entry_count,
            "left_total": format_amount(totals.left_total),
            "right_total": format_amount(totals.right_total),
            "rate": format_rate(state.rate),
        },
    }


def build_counter_view(state: CounterState, settings: MoneycountSettings) -> Dict[str, Any]:
    """Project the counter state; each row shows its text under its own column."""

    rows = [
        {
            "id": entry.id,
            "left": entry.description if entry.column is Column.LEFT else "",
            "right": entry.description if entry.column is Column.RIGHT else "",
            "column": entry.column.value,
            "editing": entry.editing,
        }
        for entry in state.entries
    ]
    return {
        "variant": "counter",
        "title": COUNTER_TITLE,
        "labels": _labels(settings),
        "rows": rows,
        "draft": _draft_fields(state),
        "summary": compute_counts(state),
    }


def message_for_keypress(key: str, confirm_key: str = "Enter") -> Message:
    """Submit on the confirm key; every other key is a no-op."""

    return Add() if key == confirm_key else Noop()


def message_for_input(
    target: str,
    value: str,
    *,
    column: Optional[Column] = None,
    entry_id: Optional[int] = None,
) -> Message:
    """Map a text input event on ``target`` to the matching update message."""

    if target == "rate":
        return UpdateRate(value)
    if column is None:
        raise ValueError(f"Input on '{target}' needs a column.")
    if target == "draft":
        return UpdateDraft(value, column)
    if target == "entry":
        if entry_id is None:
            raise ValueError("Entry input needs an entry id.")
        return UpdateEntry(entry_id, column, value)
    raise ValueError(f"Unknown input target '{target}'.")


def message_for_event(
    kind: str,
    *,
    target: str = "draft",
    value: str = "",
    key: str = "",
    column: Optional[Column] = None,
    entry_id: Optional[int] = None,
    confirm_key: str = "Enter",
) -> Message:
    if kind == "keypress":
        return message_for_keypress(key, confirm_key)
    if kind == "input":
        return message_for_input(target, value, column=column, entry_id=entry_id)
    raise ValueError(f"Unknown event kind '{kind}'.")

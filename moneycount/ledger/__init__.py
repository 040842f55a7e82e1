"""Mini README: Ledger core for the Moneycount widget.

The package holds the state shapes, the message set, the pure transition
functions and the derived totals. It has no I/O: persistence and rendering
live in ``moneycount.persistence`` and ``moneycount.interface``.
"""

from .counter import CounterState, column_count, compute_counts, transition_counter
from .derivation import (
    LedgerTotals,
    column_sum,
    compute_totals,
    convert,
    entry_count,
    format_amount,
    format_rate,
)
from .messages import Add, Message, Noop, UpdateDraft, UpdateEntry, UpdateRate
from .model import DEFAULT_RATE, Column, Entry, LedgerState, parse_number, parse_rate
from .transition import transition

__all__ = [
    "Add",
    "Column",
    "CounterState",
    "DEFAULT_RATE",
    "Entry",
    "LedgerState",
    "LedgerTotals",
    "Message",
    "Noop",
    "UpdateDraft",
    "UpdateEntry",
    "UpdateRate",
    "column_count",
    "column_sum",
    "compute_counts",
    "compute_totals",
    "convert",
    "entry_count",
    "format_amount",
    "format_rate",
    "parse_number",
    "parse_rate",
    "transition",
    "transition_counter",
]

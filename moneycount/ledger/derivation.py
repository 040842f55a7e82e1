"""Mini README: Values derived from a ledger state on every render.

Structure:
    * convert - an entry's amount expressed in both currencies.
    * column_sum - raw total of one column.
    * compute_totals - entry count, column sums and grand totals.
    * format_amount / format_rate - display text for numbers.

Nothing is cached: the state is small and the functions are pure, so the
render layer simply calls them again after each transition. Divisions by a
zero rate follow IEEE float rules and produce ``inf`` or ``nan`` rather
than raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Tuple

from .model import Column, Entry, LedgerState, parse_number


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """Summary figures shown in the ledger footer."""

    entry_count: int
    left_sum: float
    right_sum: float
    left_total: float
    right_total: float


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like hardware floats do: ``x / 0.0`` is ``±inf`` or ``nan``."""

    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def convert(entry: Entry, rate: float) -> Tuple[float, float]:
    """Return ``(left_value, right_value)`` for ``entry`` under ``rate``."""

    amount = entry.amount
    if entry.column is Column.LEFT:
        return amount, amount * rate
    return ieee_divide(amount, rate), amount


def column_sum(entries: Iterable[Entry], column: Column) -> float:
    """Sum the raw amounts typed into ``column``; unparseable text adds nothing."""

    total = 0.0
    for entry in entries:
        if entry.column is not column:
            continue
        parsed = parse_number(entry.description)
        if parsed is not None:
            total += parsed
    return total


def entry_count(entries: Iterable[Entry]) -> int:
    return sum(1 for _ in entries)


def compute_totals(state: LedgerState) -> LedgerTotals:
    """Aggregate the state into column sums and per-currency grand totals.

    Each grand total expresses everything in one currency: the native
    column as typed plus the other column converted at ``state.rate``.
    """

    left_sum = column_sum(state.entries, Column.LEFT)
    right_sum = column_sum(state.entries, Column.RIGHT)
    return LedgerTotals(
        entry_count=entry_count(state.entries),
        left_sum=left_sum,
        right_sum=right_sum,
        left_total=left_sum + ieee_divide(right_sum, state.rate),
        right_total=left_sum * state.rate + right_sum,
    )


def format_amount(value: float) -> str:
    """Two-decimal display text.

    Rounds the exact binary value with ties to even, so ``0.125`` shows as
    ``"0.12"`` and ``2.675`` (stored slightly below) as ``"2.67"``.
    """

    return format(value, ".2f")


def format_rate(rate: float) -> str:
    """Shortest text that reads back as ``rate``, in plain digits without a trailing ``.0``.

    Large and tiny rates are spelled out (``1e16`` shows as
    ``"10000000000000000"``) rather than in exponent notation.
    """

    text = repr(float(rate))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text

"""Mini README: Tests for conversions, sums and display formatting.

Covers the per-entry conversion, column sums with malformed text, the
two-entry walkthrough from an empty ledger, zero-rate arithmetic and the
two-decimal rounding rule used for every displayed amount.
"""

from __future__ import annotations

import math

import pytest

from moneycount.ledger import (
    Add,
    Column,
    Entry,
    LedgerState,
    UpdateDraft,
    column_sum,
    compute_totals,
    convert,
    entry_count,
    format_amount,
    format_rate,
    parse_number,
    transition,
)


def test_convert_left_entry_multiplies_by_rate() -> None:
    left_value, right_value = convert(Entry(id=0, description="10", column=Column.LEFT), 5.35)

    assert left_value == 10.0
    assert right_value == pytest.approx(53.5)


def test_convert_round_trips_between_columns() -> None:
    """Converting to the right and back recovers the original amount."""

    amount, rate = 12.34, 5.35
    _, right_value = convert(Entry(id=0, description=str(amount), column=Column.LEFT), rate)
    left_value, _ = convert(Entry(id=1, description=repr(right_value), column=Column.RIGHT), rate)

    assert left_value == pytest.approx(amount)


def test_convert_treats_malformed_text_as_zero() -> None:
    assert convert(Entry(id=0, description="abc", column=Column.RIGHT), 5.35) == (0.0, 0.0)
    assert convert(Entry(id=0, description="", column=Column.LEFT), 5.35) == (0.0, 0.0)


def test_convert_with_zero_rate_does_not_raise() -> None:
    left_value, right_value = convert(Entry(id=0, description="4", column=Column.RIGHT), 0.0)

    assert math.isinf(left_value) and left_value > 0
    assert right_value == 4.0
    left_value, _ = convert(Entry(id=0, description="0", column=Column.RIGHT), 0.0)
    assert math.isnan(left_value)


def test_column_sum_skips_malformed_entries() -> None:
    entries = [
        Entry(id=0, description="10", column=Column.LEFT),
        Entry(id=1, description="5", column=Column.RIGHT),
        Entry(id=2, description="abc", column=Column.LEFT),
    ]

    assert column_sum(entries, Column.LEFT) == 10.0
    assert column_sum(entries, Column.RIGHT) == 5.0
    assert entry_count(entries) == 3


def test_totals_for_two_entries_in_each_currency() -> None:
    """Walk through one left and one right entry from an empty ledger."""

    state = LedgerState.initial()
    for message in (
        UpdateDraft("10", Column.LEFT),
        Add(),
        UpdateDraft("20", Column.RIGHT),
        Add(),
    ):
        state = transition(state, message)

    totals = compute_totals(state)

    assert totals.entry_count == 2
    assert totals.left_sum == 10.0
    assert totals.right_sum == 20.0
    assert totals.left_total == pytest.approx(10 + 20 / 5.35)
    assert totals.left_total == pytest.approx(13.738, abs=1e-3)
    assert totals.right_total == pytest.approx(73.5)


def test_totals_use_raw_amounts_not_converted_values() -> None:
    state = LedgerState(
        entries=(
            Entry(id=0, description="2", column=Column.RIGHT),
            Entry(id=1, description="x", column=Column.RIGHT),
        ),
        next_id=2,
        rate=4.0,
    )

    totals = compute_totals(state)

    assert totals.left_sum == 0.0
    assert totals.right_sum == 2.0
    assert totals.left_total == pytest.approx(0.5)
    assert totals.right_total == pytest.approx(2.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.125, "0.12"),
        (0.375, "0.38"),
        (2.675, "2.67"),
        (73.5, "73.50"),
        (10 + 20 / 5.35, "13.74"),
        (0.0, "0.00"),
    ],
)
def test_format_amount_rounds_exact_value_half_to_even(value: float, expected: str) -> None:
    assert format_amount(value) == expected


@pytest.mark.parametrize(
    ("rate", "expected"),
    [(5.35, "5.35"), (5.0, "5"), (2.5, "2.5"), (1e16, "10000000000000000"), (1e-7, "0.0000001")],
)
def test_format_rate_drops_trailing_zero(rate: float, expected: str) -> None:
    assert format_rate(rate) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("10", 10.0), ("-2.5e1", -25.0), (".5", 0.5), ("+3", 3.0)],
)
def test_parse_number_accepts_plain_literals(text: str, expected: float) -> None:
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1", "1 ", "1_0", "1,5", "0x10", "１０", "٣"])
def test_parse_number_rejects_other_text(text: str) -> None:
    assert parse_number(text) is None


def test_full_width_digits_count_as_zero() -> None:
    """Digits typed with a full-width input method are not numeric amounts."""

    entries = [
        Entry(id=0, description="１０", column=Column.RIGHT),
        Entry(id=1, description="3", column=Column.RIGHT),
    ]

    assert column_sum(entries, Column.RIGHT) == 3.0
    assert convert(entries[0], 5.35) == (0.0, 0.0)

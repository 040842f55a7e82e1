"""Mini README: Data model for the two-column ledger.

Structure:
    * Column - enum naming the currency an amount is denominated in.
    * Entry - immutable ledger line holding the amount as free text.
    * LedgerState - the whole widget state, replaced on every transition.
    * parse_number / parse_rate - tolerant numeric parsing helpers.

Entries keep the text exactly as typed. Anything that does not parse as a
number counts as zero, so malformed input never stops the widget from
rendering. ``as_dict``/``from_dict`` produce the JSON blob stored by the
persistence adapter; the field names match the browser storage format of
the original widget so existing blobs can be imported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_RATE = 5.35


class Column(str, Enum):
    """Which currency column an entry belongs to."""

    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def from_str(cls, value: str) -> "Column":
        """Coerce arbitrary casing into a valid column."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported column: {value!r}") from error
        for column in cls:
            if column.value.lower() == normalised:
                return column
        raise ValueError(f"Unsupported column: {value!r}")

    def other(self) -> "Column":
        return Column.RIGHT if self is Column.LEFT else Column.LEFT


def parse_number(text: str) -> Optional[float]:
    """Parse a complete floating-point literal, returning ``None`` on failure.

    Surrounding whitespace, ``_`` digit separators and non-ASCII digits (such
    as full-width ``"１０"``) are rejected even though ``float`` would accept
    them; an amount is only numeric when the whole text is a plain literal
    such as ``"10"``, ``"-2.5e3"`` or ``"inf"``.
    """

    if not isinstance(text, str) or not text or not text.isascii():
        return None
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_rate(text: str) -> float:
    """Parse a rate, falling back to ``DEFAULT_RATE`` when the text is not numeric."""

    parsed = parse_number(text)
    return DEFAULT_RATE if parsed is None else parsed


@dataclass(frozen=True, slots=True)
class Entry:
    """One ledger line."""

    id: int
    description: str
    column: Column
    editing: bool = False

    @property
    def amount(self) -> float:
        """Numeric value of ``description``; zero when it does not parse."""

        parsed = parse_number(self.description)
        return 0.0 if parsed is None else parsed

    def as_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "column": self.column.value,
            "editing": self.editing,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Entry":
        """Rebuild an entry from its stored form, raising ``ValueError`` on bad shapes."""

        if not isinstance(payload, Mapping):
            raise ValueError("Entry payload must be an object.")
        return cls(
            id=require_count(payload, "id"),
            description=require_field(payload, "description", str),
            column=Column.from_str(require_field(payload, "column", str)),
            editing=require_field(payload, "editing", bool) if "editing" in payload else False,
        )


@dataclass(frozen=True, slots=True)
class LedgerState:
    """Complete state of the dual-currency widget.

    ``rate`` is expressed as left-currency units per one right-currency unit.
    ``next_id`` only ever grows, so ids stay unique even after edits.
    """

    entries: Tuple[Entry, ...] = ()
    pending_value: str = ""
    pending_column: Column = Column.LEFT
    next_id: int = 0
    rate: float = DEFAULT_RATE

    @classmethod
    def initial(cls) -> "LedgerState":
        return cls()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.as_dict() for entry in self.entries],
            "value": self.pending_value,
            "column": self.pending_column.value,
            "uid": self.next_id,
            "l2r_rate": self.rate,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LedgerState":
        if not isinstance(payload, Mapping):
            raise ValueError("Ledger payload must be an object.")
        rate = require_field(payload, "l2r_rate", (int, float))
        return cls(
            entries=entries_from_payload(payload),
            pending_value=require_field(payload, "value", str),
            pending_column=Column.from_str(require_field(payload, "column", str)),
            next_id=require_count(payload, "uid"),
            rate=float(rate),
        )


def entries_from_payload(payload: Mapping[str, Any]) -> Tuple[Entry, ...]:
    """Decode the ``entries`` list shared by every stored state shape."""

    raw_entries = require_field(payload, "entries", list)
    return tuple(Entry.from_dict(raw) for raw in raw_entries)


def require_field(payload: Mapping[str, Any], key: str, expected: Any) -> Any:
    if key not in payload:
        raise ValueError(f"Missing field '{key}'.")
    value = payload[key]
    # bool is an int subclass; only accept it where bool is asked for.
    if isinstance(value, bool) and expected is not bool:
        raise ValueError(f"Field '{key}' has unexpected type bool.")
    if not isinstance(value, expected):
        raise ValueError(f"Field '{key}' has unexpected type {type(value).__name__}.")
    return value


def require_count(payload: Mapping[str, Any], key: str) -> int:
    value = require_field(payload, key, int)
    if value < 0:
        raise ValueError(f"Field '{key}' must be non-negative.")
    return value

"""Mini README: Messages accepted by the ledger transition functions.

Each user interaction becomes one of these immutable values. The render
layer builds them; ``transition`` and ``transition_counter`` consume them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .model import Column


@dataclass(frozen=True, slots=True)
class Add:
    """Submit the draft as a new entry."""


@dataclass(frozen=True, slots=True)
class UpdateDraft:
    """Replace the draft text and select the column it is typed into."""

    text: str
    column: Column


@dataclass(frozen=True, slots=True)
class UpdateEntry:
    """Rewrite an existing entry's text and move it to ``column``."""

    entry_id: int
    column: Column
    text: str


@dataclass(frozen=True, slots=True)
class UpdateRate:
    """Set the exchange rate from free text."""

    text: str


@dataclass(frozen=True, slots=True)
class Noop:
    """Leave the state untouched."""


Message = Union[Add, UpdateDraft, UpdateEntry, UpdateRate, Noop]

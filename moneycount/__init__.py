"""Mini README: Core package initializer for Moneycount.

Moneycount is a two-column expense ledger: amounts typed in either
currency column are converted with an editable exchange rate and summed
into per-currency totals. The ledger core lives in ``moneycount.ledger``;
persistence, the runtime and the web interface build on top of it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

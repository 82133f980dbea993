"""Enumerations for domain models."""

from enum import Enum


class SymbolKind(str, Enum):
    """What a ledger is denominated in."""

    CURRENCY = "CURRENCY"
    INSTRUMENT = "INSTRUMENT"


class LedgerKind(str, Enum):
    """Kinds of ledgers an account can hold."""

    BANK = "BANK"  # cash amounts in a currency
    STOCK = "STOCK"  # share counts of an instrument


class MissingRatePolicy(str, Enum):
    """What to do when no rate exists within the lookback window."""

    IDENTITY = "identity"  # fall back to 1.0
    ERROR = "error"  # raise RateUnavailableError
    LAST_KNOWN = "last_known"  # latest earlier rate, error if there is none

"""Domain layer - pure business models with no external dependencies."""

from networth.domain.models import (
    SymbolKind,
    LedgerKind,
    MissingRatePolicy,
    Symbol,
    Record,
    Ledger,
    LedgerKey,
    Account,
    Portfolio,
    RatePair,
)

__all__ = [
    "SymbolKind",
    "LedgerKind",
    "MissingRatePolicy",
    "Symbol",
    "Record",
    "Ledger",
    "LedgerKey",
    "Account",
    "Portfolio",
    "RatePair",
]

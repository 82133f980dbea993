"""Domain models package."""

from networth.domain.models.enums import SymbolKind, LedgerKind, MissingRatePolicy
from networth.domain.models.symbol import Symbol
from networth.domain.models.ledger import Record, Ledger, LedgerKey
from networth.domain.models.account import Account, Portfolio
from networth.domain.models.rates import RatePair

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

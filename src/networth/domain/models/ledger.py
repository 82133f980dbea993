"""Ledger and Record domain models."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import NamedTuple, Optional

from networth.domain.models.enums import LedgerKind
from networth.domain.models.symbol import Symbol


@dataclass(frozen=True)
class Record:
    """
    A single normalized transaction line.

    `amount` is a signed delta in the ledger's own unit: a currency amount
    for bank ledgers, a share count for stock ledgers.
    """

    date: date
    amount: float
    category: str = ""
    description: str = ""


@dataclass
class Ledger:
    """Record stream for one currency or instrument within an account."""

    name: str
    symbol: Symbol
    kind: LedgerKind = LedgerKind.BANK
    records: list[Record] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = LedgerKind(self.kind)

    def deltas_by_date(self) -> dict[date, float]:
        """Sum of record amounts per calendar day."""
        deltas: dict[date, float] = defaultdict(float)
        for record in self.records:
            deltas[record.date] += record.amount
        return dict(deltas)

    @property
    def first_date(self) -> Optional[date]:
        return min((r.date for r in self.records), default=None)

    @property
    def last_date(self) -> Optional[date]:
        return max((r.date for r in self.records), default=None)


class LedgerKey(NamedTuple):
    """Identifies a ledger inside a portfolio."""

    account_id: str
    symbol_code: str

    def __str__(self) -> str:
        return f"{self.account_id}:{self.symbol_code}"

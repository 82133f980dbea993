"""Account and Portfolio domain models."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional

from networth.domain.models.ledger import Ledger, LedgerKey
from networth.domain.models.symbol import Symbol


@dataclass
class Account:
    """
    A bank or broker account.

    An account may hold several ledgers (e.g. cash plus individual stock
    positions) that are all reported in the account currency. Outflows of
    accounts flagged with `spending` count toward category summaries.
    """

    id: str
    name: str
    currency: Symbol
    owner: str = ""
    ledgers: list[Ledger] = field(default_factory=list)
    spending: bool = False
    initial_balance: Optional[float] = None
    initial_date: Optional[date] = None

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            self.currency = Symbol.currency(self.currency)

    def ledger_key(self, ledger: Ledger) -> LedgerKey:
        return LedgerKey(self.id, ledger.symbol.code)

    def cash_ledger(self) -> Optional[Ledger]:
        """Return the ledger denominated in the account currency, if any."""
        for ledger in self.ledgers:
            if ledger.symbol == self.currency:
                return ledger
        return None


@dataclass
class Portfolio:
    """Root aggregate: every account of one owner, reported in one base currency."""

    owner: str
    base_currency: Symbol
    accounts: dict[str, Account] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.base_currency, str):
            self.base_currency = Symbol.currency(self.base_currency)

    def iter_ledgers(self) -> Iterator[tuple[Account, Ledger]]:
        for account in self.accounts.values():
            for ledger in account.ledgers:
                yield account, ledger

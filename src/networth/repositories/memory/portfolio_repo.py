"""In-memory PortfolioRepository."""

from copy import deepcopy
from typing import Optional

from networth.domain.models import Portfolio


class InMemoryPortfolioRepository:
    """Stores deep copies so callers cannot mutate the stored snapshot."""

    def __init__(self, portfolios: Optional[list[Portfolio]] = None):
        self._portfolios: dict[str, Portfolio] = {}
        for portfolio in portfolios or []:
            self.save(portfolio)

    def get(self, owner: str) -> Optional[Portfolio]:
        portfolio = self._portfolios.get(owner)
        return deepcopy(portfolio) if portfolio is not None else None

    def save(self, portfolio: Portfolio) -> Portfolio:
        self._portfolios[portfolio.owner] = deepcopy(portfolio)
        return portfolio

    def list_owners(self) -> list[str]:
        return sorted(self._portfolios)

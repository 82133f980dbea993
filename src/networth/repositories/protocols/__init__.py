"""Repository protocol definitions (interfaces)."""

from networth.repositories.protocols.rate_store import RateStore
from networth.repositories.protocols.portfolio_repo import PortfolioRepository

__all__ = [
    "RateStore",
    "PortfolioRepository",
]

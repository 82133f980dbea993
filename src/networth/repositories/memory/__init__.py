"""In-memory repository implementations, used by tests and the stub mode."""

from networth.repositories.memory.rate_store import InMemoryRateStore
from networth.repositories.memory.portfolio_repo import InMemoryPortfolioRepository

__all__ = ["InMemoryRateStore", "InMemoryPortfolioRepository"]

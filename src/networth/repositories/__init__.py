"""Repository layer - data access abstractions and implementations."""

from networth.repositories.protocols import (
    RateStore,
    PortfolioRepository,
)

__all__ = [
    "RateStore",
    "PortfolioRepository",
]

"""View models for service outputs."""

from networth.domain.views.portfolio import (
    SpendPerMonth,
    CategoryTotals,
    AggregatedSeries,
    AccountSeries,
    PortfolioSummary,
    PairInfo,
)

__all__ = [
    "SpendPerMonth",
    "CategoryTotals",
    "AggregatedSeries",
    "AccountSeries",
    "PortfolioSummary",
    "PairInfo",
]

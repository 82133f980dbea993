"""Service layer - valuation engine and its collaborators."""

from networth.services.rate_cache import RateCache
from networth.services.conversion import CurrencyConverter, conversion_legs
from networth.services.ledger_processing import with_initial_balance
from networth.services.date_series import build_date_axis, date_range, to_timestamps
from networth.services.valuation import LedgerValuator
from networth.services.aggregation import PortfolioAggregator
from networth.services.trend import TrendProjector, linear_regression
from networth.services.spend import SpendAggregator
from networth.services.portfolio_summary import PortfolioSummaryService

__all__ = [
    "RateCache",
    "CurrencyConverter",
    "conversion_legs",
    "with_initial_balance",
    "build_date_axis",
    "date_range",
    "to_timestamps",
    "LedgerValuator",
    "PortfolioAggregator",
    "TrendProjector",
    "linear_regression",
    "SpendAggregator",
    "PortfolioSummaryService",
]

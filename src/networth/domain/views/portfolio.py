"""View models for valuation and summary outputs."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

# month -> year -> category -> amount spent (positive)
SpendPerMonth = dict[int, dict[int, dict[str, float]]]

# account id -> category -> signed total
CategoryTotals = dict[str, dict[str, float]]


@dataclass
class AggregatedSeries:
    """Per-account and total series after windowing."""

    per_account: dict[str, list[float]] = field(default_factory=dict)
    total: list[float] = field(default_factory=list)
    offset: int = 0  # leading samples discarded by the window


@dataclass
class AccountSeries:
    """Balance series of one account, in the base currency."""

    id: str
    name: str
    currency: str
    series: list[float] = field(default_factory=list)


@dataclass
class PortfolioSummary:
    """Everything the dashboard needs, aligned on one date axis."""

    base_currency: str
    dates: list[date] = field(default_factory=list)
    balances: list[AccountSeries] = field(default_factory=list)
    total: list[float] = field(default_factory=list)
    prediction_dates: list[date] = field(default_factory=list)
    prediction: list[float] = field(default_factory=list)
    spend_per_month: SpendPerMonth = field(default_factory=dict)
    as_of: Optional[date] = None


@dataclass
class PairInfo:
    """Cached rate pair metadata."""

    key: str
    from_code: str
    to_code: str
    latest_date: Optional[date]
    points: int

"""Orchestrates valuation, aggregation, projection and spend for one portfolio."""

import logging
from datetime import date
from typing import Optional

from networth.config.settings import Settings
from networth.core.exceptions import RegressionError
from networth.core.timezone import today_local
from networth.domain.models import LedgerKey, MissingRatePolicy, Portfolio
from networth.domain.views import AccountSeries, CategoryTotals, PortfolioSummary
from networth.services.aggregation import PortfolioAggregator
from networth.services.date_series import build_date_axis, future_dates
from networth.services.ledger_processing import with_initial_balance
from networth.services.rate_cache import RateCache
from networth.services.spend import SpendAggregator
from networth.services.trend import TrendProjector
from networth.services.valuation import LedgerValuator

logger = logging.getLogger(__name__)


class PortfolioSummaryService:
    """
    Builds the dashboard summary of a portfolio snapshot.

    Ledgers are valued sequentially and merged by LedgerKey, so output order
    follows the portfolio's account order. Any failure other than a
    degenerate trend aborts the whole summary.
    """

    def __init__(
        self,
        rate_cache: RateCache,
        lookback_days: int = 2,
        missing_rate_policy: MissingRatePolicy = MissingRatePolicy.LAST_KNOWN,
        history_window: int = 1095,
        trend_window: int = 300,
        trend_horizon: int = 365,
    ):
        self._valuator = LedgerValuator(rate_cache, lookback_days, missing_rate_policy)
        self._spend = SpendAggregator(rate_cache, lookback_days, missing_rate_policy)
        self._aggregator = PortfolioAggregator(history_window)
        self._projector = TrendProjector(trend_window, trend_horizon)

    @classmethod
    def from_settings(cls, rate_cache: RateCache, settings: Settings) -> "PortfolioSummaryService":
        return cls(
            rate_cache,
            lookback_days=settings.fx_lookback_days,
            missing_rate_policy=settings.missing_rate_policy,
            history_window=settings.history_window_days,
            trend_window=settings.trend_window,
            trend_horizon=settings.trend_horizon,
        )

    def summarize(self, portfolio: Portfolio, today: Optional[date] = None) -> PortfolioSummary:
        """Compute balances, total, prediction and spend for the portfolio."""
        today = today or today_local()
        base = portfolio.base_currency
        accounts = [with_initial_balance(account) for account in portfolio.accounts.values()]

        dates = build_date_axis(accounts, today)
        if not dates:
            logger.info("Portfolio of %s has no records", portfolio.owner)
            return PortfolioSummary(
                base_currency=base.code,
                balances=[AccountSeries(a.id, a.name, base.code, []) for a in accounts],
                as_of=today,
            )

        converter = self._valuator.converter()
        valuations: dict[LedgerKey, list[float]] = {}
        for account in accounts:
            for ledger in account.ledgers:
                key = account.ledger_key(ledger)
                series = self._valuator.value(
                    ledger, dates, base, account.currency, converter=converter
                )
                previous = valuations.get(key)
                if previous is not None:
                    series = [a + b for a, b in zip(previous, series)]
                valuations[key] = series

        aggregated = self._aggregator.aggregate(
            valuations,
            length=len(dates),
            account_ids=[account.id for account in accounts],
        )
        window_dates = dates[aggregated.offset:]

        try:
            prediction = self._projector.project(aggregated.total)
        except RegressionError as exc:
            logger.warning("Omitting trend prediction for %s: %s", portfolio.owner, exc.message)
            prediction = []

        spend = self._spend.spend(accounts, base, converter=converter)

        return PortfolioSummary(
            base_currency=base.code,
            dates=window_dates,
            balances=[
                AccountSeries(
                    id=account.id,
                    name=account.name,
                    currency=base.code,
                    series=aggregated.per_account[account.id],
                )
                for account in accounts
            ],
            total=aggregated.total,
            prediction_dates=future_dates(window_dates[-1], len(prediction)),
            prediction=prediction,
            spend_per_month=spend,
            as_of=today,
        )

    def category_totals(
        self,
        portfolio: Portfolio,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> CategoryTotals:
        """Per-account category totals in the base currency."""
        accounts = [with_initial_balance(account) for account in portfolio.accounts.values()]
        return self._spend.category_totals(accounts, portfolio.base_currency, start, end)

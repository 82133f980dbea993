"""Spending and category summaries in the base currency."""

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from networth.domain.models import Account, MissingRatePolicy, Symbol
from networth.domain.views import CategoryTotals, SpendPerMonth
from networth.services.conversion import CurrencyConverter, conversion_legs
from networth.services.rate_cache import RateCache


class SpendAggregator:
    """
    Groups converted record amounts by category.

    Each record is converted on its own date, not cumulatively.
    """

    def __init__(
        self,
        rate_cache: RateCache,
        lookback_days: int = 2,
        missing_rate_policy: MissingRatePolicy = MissingRatePolicy.LAST_KNOWN,
    ):
        self._rate_cache = rate_cache
        self._lookback_days = lookback_days
        self._missing_rate_policy = missing_rate_policy

    def _converter(self) -> CurrencyConverter:
        return CurrencyConverter(
            self._rate_cache,
            lookback_days=self._lookback_days,
            missing_rate_policy=self._missing_rate_policy,
        )

    def spend(
        self,
        accounts: Iterable[Account],
        base_currency: Symbol,
        converter: Optional[CurrencyConverter] = None,
    ) -> SpendPerMonth:
        """
        Outflows of spending accounts as month -> year -> category -> amount.

        Amounts are reported positive. Inflows are skipped without a rate
        lookup.
        """
        converter = converter or self._converter()
        result: dict[int, dict[int, dict[str, float]]] = defaultdict(
            lambda: defaultdict(lambda: defaultdict(float))
        )
        for account in accounts:
            if not account.spending:
                continue
            for ledger in account.ledgers:
                legs = conversion_legs(ledger.symbol, base_currency, account.currency)
                for record in ledger.records:
                    if record.amount >= 0:
                        continue
                    amount = converter.convert(record.amount, legs, record.date)
                    month_entry = result[record.date.month][record.date.year]
                    month_entry[record.category] += -amount
        return {
            month: {year: dict(categories) for year, categories in years.items()}
            for month, years in result.items()
        }

    def category_totals(
        self,
        accounts: Iterable[Account],
        base_currency: Symbol,
        start: Optional[date] = None,
        end: Optional[date] = None,
        converter: Optional[CurrencyConverter] = None,
    ) -> CategoryTotals:
        """
        Signed per-category totals of every account within [start, end].

        Every account is reported, including ones without records in range.
        """
        converter = converter or self._converter()
        totals: CategoryTotals = {}
        for account in accounts:
            categories: dict[str, float] = defaultdict(float)
            for ledger in account.ledgers:
                legs = conversion_legs(ledger.symbol, base_currency, account.currency)
                for record in ledger.records:
                    if start is not None and record.date < start:
                        continue
                    if end is not None and record.date > end:
                        continue
                    categories[record.category] += converter.convert(record.amount, legs, record.date)
            totals[account.id] = dict(categories)
        return totals

"""Daily base-currency valuation of a single ledger."""

from datetime import date
from typing import Optional, Sequence

from networth.domain.models import Ledger, MissingRatePolicy, Symbol
from networth.services.conversion import CurrencyConverter, conversion_legs
from networth.services.rate_cache import RateCache


class LedgerValuator:
    """
    Turns a ledger's records into one base-currency value per axis date.

    The running balance is cumulative: records dated before the first axis
    date form the opening balance, records after the last axis date are
    ignored. Dates where the balance is zero emit 0.0 without a rate lookup.
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

    def converter(self) -> CurrencyConverter:
        """A fresh converter sharing this valuator's lookup rules."""
        return CurrencyConverter(
            self._rate_cache,
            lookback_days=self._lookback_days,
            missing_rate_policy=self._missing_rate_policy,
        )

    def value(
        self,
        ledger: Ledger,
        dates: Sequence[date],
        base_currency: Symbol,
        account_currency: Optional[Symbol] = None,
        converter: Optional[CurrencyConverter] = None,
    ) -> list[float]:
        """
        Value the ledger on every date of the axis.

        Args:
            ledger: Ledger to value.
            dates: Ascending, contiguous date axis.
            base_currency: Output currency.
            account_currency: Quote currency of instrument ledgers.
            converter: Converter to share pair snapshots across ledgers.

        Raises:
            RateUnavailableError: A required rate is missing and the policy
                does not allow a fallback.
        """
        if not dates:
            return []
        converter = converter or self.converter()
        legs = conversion_legs(ledger.symbol, base_currency, account_currency)
        deltas = ledger.deltas_by_date()

        start = dates[0]
        balance = sum(amount for day, amount in deltas.items() if day < start)

        values: list[float] = []
        for day in dates:
            balance += deltas.get(day, 0.0)
            values.append(converter.convert(balance, legs, day))
        return values

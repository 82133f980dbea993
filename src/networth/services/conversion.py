"""Per-date conversion of ledger units into the base currency."""

import logging
from datetime import date
from typing import Optional

from networth.core.exceptions import RateUnavailableError
from networth.domain.models import MissingRatePolicy, RatePair, Symbol
from networth.services.rate_cache import RateCache

logger = logging.getLogger(__name__)

# Ordered conversion legs, each (from_symbol, to_symbol)
Legs = tuple[tuple[Symbol, Symbol], ...]


def conversion_legs(
    symbol: Symbol,
    base_currency: Symbol,
    account_currency: Optional[Symbol] = None,
) -> Legs:
    """
    Legs needed to express one unit of `symbol` in `base_currency`.

    Instruments are quoted in their account's currency, so they go through
    that currency first. An empty tuple means no conversion.
    """
    if symbol == base_currency:
        return ()
    if symbol.is_instrument and account_currency is not None:
        if account_currency == base_currency:
            return ((symbol, account_currency),)
        return ((symbol, account_currency), (account_currency, base_currency))
    return ((symbol, base_currency),)


class CurrencyConverter:
    """
    Looks up daily conversion rates for one computation.

    Pairs are pulled from the RateCache the first time a conversion actually
    needs them and then reused, so every date in a request reads the same
    snapshot. A zero amount never triggers a lookup.
    """

    def __init__(
        self,
        rate_cache: RateCache,
        lookback_days: int = 2,
        missing_rate_policy: MissingRatePolicy = MissingRatePolicy.LAST_KNOWN,
    ):
        self._rate_cache = rate_cache
        self._lookback_days = lookback_days
        self._policy = MissingRatePolicy(missing_rate_policy)
        self._pairs: dict[tuple[str, str], RatePair] = {}
        self._warned: set[str] = set()

    @property
    def policy(self) -> MissingRatePolicy:
        return self._policy

    def rate(self, from_symbol: Symbol, to_symbol: Symbol, on_date: date) -> float:
        """Rate for one leg on a date, applying the missing-rate policy."""
        if from_symbol == to_symbol:
            return 1.0
        pair = self._pair(from_symbol, to_symbol)
        rate = pair.rate_on(on_date, self._lookback_days)
        if rate is not None:
            return rate
        return self._missing(pair, on_date)

    def factor(self, legs: Legs, on_date: date) -> float:
        """Product of every leg's rate on the same date."""
        result = 1.0
        for from_symbol, to_symbol in legs:
            result *= self.rate(from_symbol, to_symbol, on_date)
        return result

    def convert(self, amount: float, legs: Legs, on_date: date) -> float:
        if amount == 0 or not legs:
            return float(amount)
        return amount * self.factor(legs, on_date)

    def _pair(self, from_symbol: Symbol, to_symbol: Symbol) -> RatePair:
        key = (from_symbol.code, to_symbol.code)
        pair = self._pairs.get(key)
        if pair is None:
            pair = self._rate_cache.get(from_symbol, to_symbol)
            self._pairs[key] = pair
        return pair

    def _missing(self, pair: RatePair, on_date: date) -> float:
        if self._policy == MissingRatePolicy.IDENTITY:
            if pair.key not in self._warned:
                self._warned.add(pair.key)
                logger.warning(
                    "No %s rate within %d days of %s, using 1.0",
                    pair.key, self._lookback_days, on_date,
                )
            return 1.0

        if self._policy == MissingRatePolicy.LAST_KNOWN:
            rate = pair.last_known(on_date)
            if rate is not None:
                return rate

        raise RateUnavailableError(pair.from_code, pair.to_code, on_date)

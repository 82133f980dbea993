"""Stub rate provider for offline/testing use."""

from datetime import date, timedelta
from typing import Optional

from networth.domain.models import Symbol

# Approximate flat rates, quoted as units of the second code per first code
_STUB_RATES: dict[tuple[str, str], float] = {
    ("USD", "CHF"): 0.88,
    ("EUR", "CHF"): 0.95,
    ("GBP", "CHF"): 1.12,
    ("PLN", "CHF"): 0.22,
    ("JPY", "CHF"): 0.0059,
    ("CHF", "USD"): 1.14,
    ("EUR", "USD"): 1.08,
    ("AAPL", "USD"): 185.50,
    ("MSFT", "USD"): 378.25,
    ("VTI", "USD"): 252.30,
}


class StubRateProvider:
    """
    Stub provider with deterministic flat rates for offline operation.

    Unknown pairs get `default_rate`. Weekends are skipped so lookups
    exercise the same gaps as real market data.
    """

    def __init__(
        self,
        rates: Optional[dict[tuple[str, str], float]] = None,
        default_rate: float = 1.0,
        skip_weekends: bool = True,
    ):
        self._rates = dict(_STUB_RATES if rates is None else rates)
        self._default_rate = default_rate
        self._skip_weekends = skip_weekends

    def fetch_history(
        self,
        from_symbol: Symbol,
        to_symbol: Symbol,
        start: date,
        end: date,
    ) -> dict[date, float]:
        rate = self._rates.get((from_symbol.code, to_symbol.code), self._default_rate)
        result: dict[date, float] = {}
        d = start
        while d <= end:
            if not (self._skip_weekends and d.weekday() >= 5):
                result[d] = rate
            d += timedelta(days=1)
        return result

"""
Yahoo Finance rate provider: daily closes via yfinance.
Currency pairs are fetched as "FROMTO=X"; instruments by their ticker.
"""

import logging
from datetime import date, timedelta

from networth.core.exceptions import FetchError
from networth.domain.models import Symbol
from networth.providers.rate_provider import quote_ticker, rates_from_frame

logger = logging.getLogger(__name__)


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YahooFinanceRateProvider:
    """Fetches historical daily closes from Yahoo Finance. Needs no credentials."""

    def fetch_history(
        self,
        from_symbol: Symbol,
        to_symbol: Symbol,
        start: date,
        end: date,
    ) -> dict[date, float]:
        ticker = quote_ticker(from_symbol, to_symbol)
        yf = _get_yf()
        logger.info("Downloading %s history %s..%s from Yahoo Finance", ticker, start, end)
        try:
            frame = yf.download(
                ticker,
                start=start,
                end=end + timedelta(days=1),  # end is exclusive
                interval="1d",
                progress=False,
                auto_adjust=False,
                threads=False,
            )
        except Exception as exc:
            raise FetchError(f"Yahoo Finance download failed for {ticker}: {exc}") from exc

        rates = rates_from_frame(frame)
        if not rates:
            raise FetchError(f"Yahoo Finance returned no data for {ticker}")
        return rates

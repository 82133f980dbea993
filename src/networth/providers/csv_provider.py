"""
HTTP CSV rate provider: GET a daily OHLC table between two unix timestamps.
Only the Date and Close columns are used. An API key is mandatory.
"""

import io
import logging
from datetime import date, timedelta
from typing import Optional

import pandas as pd
import requests

from networth.core.exceptions import ConfigError, FetchError
from networth.core.timezone import date_to_timestamp
from networth.domain.models import Symbol
from networth.providers.rate_provider import quote_ticker, rates_from_frame

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpCsvRateProvider:
    """
    Downloads quote history as CSV from a URL template.

    The template receives `{ticker}`; the period and API key travel as query
    parameters (period1, period2, interval, events, apikey).
    """

    def __init__(
        self,
        url_template: str,
        api_key: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._url_template = url_template
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def fetch_history(
        self,
        from_symbol: Symbol,
        to_symbol: Symbol,
        start: date,
        end: date,
    ) -> dict[date, float]:
        # Credentials are only required for an actual download
        if not self._api_key:
            raise ConfigError("fx_api_key is required to download quote history")

        ticker = quote_ticker(from_symbol, to_symbol)
        url = self._url_template.format(ticker=ticker)
        params = {
            "period1": date_to_timestamp(start),
            "period2": date_to_timestamp(end + timedelta(days=1)),
            "interval": "1d",
            "events": "history",
            "includeAdjustedClose": "true",
            "apikey": self._api_key,
        }
        logger.info("Downloading %s history %s..%s from %s", ticker, start, end, url)
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Quote download failed for {ticker}: {exc}") from exc

        try:
            frame = pd.read_csv(io.StringIO(response.text), na_values=["null"])
        except (ValueError, pd.errors.ParserError) as exc:
            raise FetchError(f"Unparseable quote CSV for {ticker}: {exc}") from exc

        rates = rates_from_frame(frame)
        if not rates:
            raise FetchError(f"Quote CSV for {ticker} contained no rates")
        return rates

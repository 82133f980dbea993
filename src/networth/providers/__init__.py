"""Remote quote sources for historical rates."""

from networth.providers.rate_provider import RateProvider, quote_ticker, rates_from_frame
from networth.providers.yahoo_provider import YahooFinanceRateProvider
from networth.providers.csv_provider import HttpCsvRateProvider
from networth.providers.stub_provider import StubRateProvider

__all__ = [
    "RateProvider",
    "quote_ticker",
    "rates_from_frame",
    "YahooFinanceRateProvider",
    "HttpCsvRateProvider",
    "StubRateProvider",
]

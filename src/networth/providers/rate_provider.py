"""Rate provider protocol and shared helpers."""

from datetime import date
from typing import Protocol

import pandas as pd

from networth.core.exceptions import FetchError
from networth.domain.models import Symbol


class RateProvider(Protocol):
    """
    Protocol for remote historical-quote sources.

    Implementations fetch a full daily series and return it as date -> rate.
    Missing days (weekends, holidays) are simply absent from the result.
    Raise FetchError when the source is unreachable or the payload unusable,
    and ConfigError when required credentials are missing.
    """

    def fetch_history(
        self,
        from_symbol: Symbol,
        to_symbol: Symbol,
        start: date,
        end: date,
    ) -> dict[date, float]:
        """Fetch daily closing rates for converting from_symbol into to_symbol."""
        ...


def quote_ticker(from_symbol: Symbol, to_symbol: Symbol) -> str:
    """
    Ticker of the quote series for a pair.

    Currency pairs use the FX notation ("EURCHF=X"); instruments are quoted
    by their own ticker in their trading currency.
    """
    if from_symbol.is_instrument:
        return from_symbol.code
    return f"{from_symbol.code}{to_symbol.code}=X"


def rates_from_frame(frame: pd.DataFrame) -> dict[date, float]:
    """
    Extract date -> close from an OHLC frame.

    Accepts both a Date column (CSV downloads) and a DatetimeIndex
    (yfinance frames, possibly with a (Price, Ticker) column MultiIndex).
    Rows with a null close are dropped.
    """
    if frame is None or frame.empty:
        return {}
    if "Date" in frame.columns:
        frame = frame.set_index("Date")
    if "Close" not in frame.columns:
        raise FetchError(f"Quote data has no Close column: {list(frame.columns)}")

    close = frame["Close"]
    if isinstance(close, pd.DataFrame):
        # yfinance keeps a ticker level even for a single symbol
        close = close.iloc[:, 0]
    close = pd.to_numeric(close, errors="coerce").dropna()
    index = pd.to_datetime(close.index)
    return {ts.date(): float(value) for ts, value in zip(index, close.to_numpy())}

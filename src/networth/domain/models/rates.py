"""Cached historical rate series between two symbols."""

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional


@dataclass
class RatePair:
    """
    Historical daily rates for converting `from_code` into `to_code`.

    The series is keyed by calendar date with no required density; weekends
    and holidays are simply absent. `dirty` marks data not yet flushed to
    durable storage.

    IMPORTANT: Owned by RateCache; everyone else works on snapshots.
    """

    from_code: str
    to_code: str
    rates: dict[date, float] = field(default_factory=dict)
    dirty: bool = False
    fetched_on: Optional[date] = None

    def __post_init__(self) -> None:
        self._sorted_dates = sorted(self.rates)

    @property
    def key(self) -> str:
        return f"{self.from_code}:{self.to_code}"

    @property
    def latest_date(self) -> Optional[date]:
        return self._sorted_dates[-1] if self._sorted_dates else None

    def is_fresh(self, today: date) -> bool:
        """
        Coarse daily freshness check.

        Fresh when the series covers today, or when it was already fetched
        today (the source may not have published today's close yet).
        """
        latest = self.latest_date
        if latest is not None and latest >= today:
            return True
        return self.fetched_on is not None and self.fetched_on >= today

    def rate_on(self, on_date: date, lookback_days: int = 0) -> Optional[float]:
        """Rate on the date, stepping back day by day up to `lookback_days`."""
        for offset in range(lookback_days + 1):
            rate = self.rates.get(on_date - timedelta(days=offset))
            if rate is not None:
                return rate
        return None

    def last_known(self, on_date: date) -> Optional[float]:
        """Most recent rate at or before the date, however old."""
        index = bisect_right(self._sorted_dates, on_date)
        if index == 0:
            return None
        return self.rates[self._sorted_dates[index - 1]]

    def snapshot(self) -> "RatePair":
        """Independent copy safe to hand out to valuation code."""
        return RatePair(
            from_code=self.from_code,
            to_code=self.to_code,
            rates=dict(self.rates),
            dirty=self.dirty,
            fetched_on=self.fetched_on,
        )

"""Disk-backed cache of historical rate series with daily staleness checks."""

import logging
import threading
from datetime import date
from typing import Callable, Optional

from networth.core.timezone import today_local
from networth.domain.models import RatePair, Symbol
from networth.domain.views import PairInfo
from networth.providers.rate_provider import RateProvider
from networth.repositories.protocols import RateStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_START = date(2016, 1, 1)


class RateCache:
    """
    Owns every cached RatePair and hands out snapshots.

    All access is serialized under a single lock held for the whole `get`
    call, including any remote fetch and the write-through persist. Callers
    for different pairs therefore wait on each other.
    """

    def __init__(
        self,
        store: RateStore,
        provider: RateProvider,
        history_start: date = DEFAULT_HISTORY_START,
        today: Callable[[], date] = today_local,
    ):
        self._store = store
        self._provider = provider
        self._history_start = history_start
        self._today = today
        self._lock = threading.Lock()
        self._pairs: dict[tuple[str, str], RatePair] = store.load_all()

    def get(self, from_symbol: Symbol, to_symbol: Symbol) -> RatePair:
        """
        Return the series converting `from_symbol` into `to_symbol`.

        A fresh cached pair is returned without I/O. A missing or stale pair
        is refetched from `history_start` through today, replaced in the
        cache and persisted before returning.

        Raises:
            FetchError: The quote source is unreachable or returned no data.
            ConfigError: The quote source needs credentials that are absent.
            PersistenceError: The fetched pair could not be written.
        """
        key = (from_symbol.code, to_symbol.code)
        with self._lock:
            today = self._today()
            cached = self._pairs.get(key)
            if cached is not None and cached.is_fresh(today):
                logger.debug("Rate cache hit for %s", cached.key)
                if cached.dirty:
                    # An earlier persist failed; retry before serving.
                    self._flush(cached)
                return cached.snapshot()

            reason = "missing" if cached is None else f"stale (latest {cached.latest_date})"
            logger.info("Fetching %s:%s rates, cache entry %s", key[0], key[1], reason)
            rates = self._provider.fetch_history(from_symbol, to_symbol, self._history_start, today)

            pair = RatePair(
                from_code=key[0],
                to_code=key[1],
                rates=rates,
                dirty=True,
                fetched_on=today,
            )
            self._pairs[key] = pair
            self._flush(pair)
            return pair.snapshot()

    def peek(self, from_code: str, to_code: str) -> Optional[RatePair]:
        """Snapshot of a cached pair without any freshness check or fetch."""
        with self._lock:
            pair = self._pairs.get((from_code.upper(), to_code.upper()))
            return pair.snapshot() if pair is not None else None

    def pairs(self) -> list[PairInfo]:
        """Describe every cached pair, ordered by key."""
        with self._lock:
            return [
                PairInfo(
                    key=pair.key,
                    from_code=pair.from_code,
                    to_code=pair.to_code,
                    latest_date=pair.latest_date,
                    points=len(pair.rates),
                )
                for _, pair in sorted(self._pairs.items())
            ]

    def _flush(self, pair: RatePair) -> None:
        # Caller holds the lock; a failed save leaves the pair dirty.
        self._store.save(pair)
        pair.dirty = False
        logger.info("Persisted %d %s rates", len(pair.rates), pair.key)

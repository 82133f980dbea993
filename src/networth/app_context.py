"""Application context: composition root for the valuation engine.

Builds the long-lived collaborators once per process (rate store, quote
provider, rate cache) and hands them to the HTTP layer and scripts.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from networth.config.settings import Settings, get_settings
from networth.core.exceptions import ConfigError
from networth.providers import (
    HttpCsvRateProvider,
    RateProvider,
    StubRateProvider,
    YahooFinanceRateProvider,
)
from networth.repositories.parquet import ParquetRateStore
from networth.repositories.protocols import RateStore
from networth.repositories.sqlalchemy import (
    SqlAlchemyPortfolioRepository,
    get_session,
    init_db,
)
from networth.services import PortfolioSummaryService, RateCache

logger = logging.getLogger(__name__)


def build_rate_provider(settings: Settings) -> RateProvider:
    """Select the quote source named by `fx_provider`."""
    if settings.fx_provider == "yahoo":
        return YahooFinanceRateProvider()
    if settings.fx_provider == "csv":
        return HttpCsvRateProvider(
            url_template=settings.fx_csv_url,
            api_key=settings.fx_api_key,
            timeout_seconds=settings.fx_fetch_timeout_seconds,
        )
    if settings.fx_provider == "stub":
        return StubRateProvider()
    raise ConfigError(f"Unknown FX provider: {settings.fx_provider}")


class AppContext:
    """
    Owns the process-wide rate cache and builds request-scoped services.

    The rate cache is the only shared mutable state; it is created in
    `initialize` and reused by every request.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rate_store: Optional[RateStore] = None,
        provider: Optional[RateProvider] = None,
    ):
        self._settings = settings or get_settings()
        self._rate_store = rate_store
        self._provider = provider
        self._rate_cache: Optional[RateCache] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_initialized(self) -> bool:
        return self._rate_cache is not None

    def initialize(self) -> None:
        """Create database tables and load the rate cache from disk."""
        init_db()
        store = self._rate_store or ParquetRateStore(self._settings.get_rate_cache_dir())
        provider = self._provider or build_rate_provider(self._settings)
        self._rate_cache = RateCache(
            store=store,
            provider=provider,
            history_start=self._settings.fx_history_start,
        )
        logger.info(
            "Initialized with %s quotes, base currency %s",
            self._settings.fx_provider,
            self._settings.base_currency,
        )

    @property
    def rate_cache(self) -> RateCache:
        if self._rate_cache is None:
            self.initialize()
        return self._rate_cache

    def summary_service(self) -> PortfolioSummaryService:
        return PortfolioSummaryService.from_settings(self.rate_cache, self._settings)

    @contextmanager
    def portfolio_repo(self) -> Iterator[SqlAlchemyPortfolioRepository]:
        """Repository bound to a session that is closed on exit."""
        session = get_session()
        try:
            yield SqlAlchemyPortfolioRepository(session)
        finally:
            session.close()

"""
Pytest configuration and fixtures for net worth tracker tests.

This module provides:
- Isolated settings pointing at a temporary data directory
- A fixed "today" for deterministic freshness checks
- Factory helpers for symbols, ledgers, accounts and portfolios
- Counting and failing rate providers
- In-memory SQLite database fixtures
- FastAPI test client with in-memory collaborators
"""

from datetime import date, timedelta
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from networth.main import app
from networth.api.deps import get_portfolio_repo, get_rate_cache, get_today
from networth.config.settings import Settings, set_settings, reset_settings
from networth.core.exceptions import FetchError
from networth.domain.models import (
    Account,
    Ledger,
    LedgerKind,
    Portfolio,
    Record,
    Symbol,
)
from networth.providers import StubRateProvider
from networth.repositories.memory import InMemoryPortfolioRepository, InMemoryRateStore
from networth.repositories.sqlalchemy.database import Base, reset_database
# Import ORM models to register them with Base before creating tables
from networth.repositories.sqlalchemy import orm_models  # noqa: F401
from networth.services import RateCache

CHF = Symbol.currency("CHF")
EUR = Symbol.currency("EUR")
USD = Symbol.currency("USD")

FIXED_TODAY = date(2024, 6, 15)
HISTORY_START = date(2024, 1, 1)


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def test_settings(tmp_path) -> Settings:
    """Point settings at a temporary data dir with offline quotes."""
    reset_settings()
    settings = Settings(
        _env_file=None,
        data_dir=tmp_path / "data",
        fx_provider="stub",
        base_currency="CHF",
        fx_history_start=HISTORY_START,
    )
    set_settings(settings)
    yield settings
    reset_settings()
    reset_database()


@pytest.fixture
def fixed_today() -> date:
    """Fixed 'today' for deterministic tests."""
    return FIXED_TODAY


# =============================================================================
# RATE PROVIDER FIXTURES
# =============================================================================


class CountingRateProvider:
    """
    Deterministic provider that records every fetch.

    `rates` maps (from, to) to a flat rate filled daily over the requested
    range; `series` maps (from, to) to an exact date -> rate table and wins
    over `rates`.
    """

    def __init__(
        self,
        rates: Optional[dict[tuple[str, str], float]] = None,
        series: Optional[dict[tuple[str, str], dict[date, float]]] = None,
    ):
        self._stub = StubRateProvider(rates=rates or {}, default_rate=1.0, skip_weekends=False)
        self._series = series or {}
        self.calls: list[tuple[str, str, date, date]] = []

    def fetch_history(
        self,
        from_symbol: Symbol,
        to_symbol: Symbol,
        start: date,
        end: date,
    ) -> dict[date, float]:
        key = (from_symbol.code, to_symbol.code)
        self.calls.append((key[0], key[1], start, end))
        if key in self._series:
            return {d: r for d, r in self._series[key].items() if start <= d <= end}
        return self._stub.fetch_history(from_symbol, to_symbol, start, end)

    def call_count(self, from_code: str, to_code: str) -> int:
        return sum(1 for call in self.calls if call[:2] == (from_code, to_code))


class FailingRateProvider:
    """Provider whose source is always unreachable."""

    def __init__(self):
        self.calls = 0

    def fetch_history(self, from_symbol, to_symbol, start, end) -> dict[date, float]:
        self.calls += 1
        raise FetchError("Network unavailable")


@pytest.fixture
def counting_provider() -> CountingRateProvider:
    """Provider quoting EUR at 1.2 CHF, USD at 0.9 CHF and AAPL at 200 USD."""
    return CountingRateProvider(
        rates={
            ("EUR", "CHF"): 1.2,
            ("USD", "CHF"): 0.9,
            ("AAPL", "USD"): 200.0,
        }
    )


@pytest.fixture
def failing_provider() -> FailingRateProvider:
    return FailingRateProvider()


@pytest.fixture
def rate_store() -> InMemoryRateStore:
    return InMemoryRateStore()


@pytest.fixture
def rate_cache(rate_store, counting_provider, fixed_today) -> RateCache:
    """RateCache over an in-memory store and the counting provider."""
    return RateCache(
        store=rate_store,
        provider=counting_provider,
        history_start=HISTORY_START,
        today=lambda: fixed_today,
    )


@pytest.fixture
def make_rate_cache(rate_store, fixed_today) -> Callable[..., RateCache]:
    """Factory for RateCache instances over custom providers."""

    def _make(provider, store=None, today: Optional[date] = None) -> RateCache:
        return RateCache(
            store=store if store is not None else rate_store,
            provider=provider,
            history_start=HISTORY_START,
            today=lambda: today or fixed_today,
        )

    return _make


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# FACTORY HELPERS
# =============================================================================


def day(n: int, start: date = date(2024, 6, 10)) -> date:
    """The n-th day after a fixed start date."""
    return start + timedelta(days=n)


def make_ledger(
    symbol: Symbol,
    records: list[tuple[date, float]] | list[Record],
    name: Optional[str] = None,
    kind: LedgerKind = LedgerKind.BANK,
) -> Ledger:
    """Build a ledger from Records or (date, amount) tuples."""
    built = [
        r if isinstance(r, Record) else Record(date=r[0], amount=r[1])
        for r in records
    ]
    return Ledger(name=name or symbol.code, symbol=symbol, kind=kind, records=built)


def make_account(
    account_id: str,
    currency: Symbol,
    ledgers: Optional[list[Ledger]] = None,
    name: Optional[str] = None,
    spending: bool = False,
    initial_balance: Optional[float] = None,
    initial_date: Optional[date] = None,
) -> Account:
    return Account(
        id=account_id,
        name=name or account_id.title(),
        currency=currency,
        owner="alice",
        ledgers=ledgers or [],
        spending=spending,
        initial_balance=initial_balance,
        initial_date=initial_date,
    )


def make_portfolio(*accounts: Account, base: Symbol = CHF, owner: str = "alice") -> Portfolio:
    return Portfolio(
        owner=owner,
        base_currency=base,
        accounts={account.id: account for account in accounts},
    )


@pytest.fixture
def scenario_portfolio() -> Portfolio:
    """
    Account A in CHF and account B in EUR, each +100 on day 0 and -30 on day 5.
    """
    records = [(day(0), 100.0), (day(5), -30.0)]
    account_a = make_account("a", CHF, [make_ledger(CHF, records)], name="Account A")
    account_b = make_account("b", EUR, [make_ledger(EUR, records)], name="Account B")
    return make_portfolio(account_a, account_b)


@pytest.fixture
def scenario_dates() -> list[date]:
    """Six-day axis starting on the scenario's day 0."""
    return [day(i) for i in range(6)]


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def portfolio_repo() -> InMemoryPortfolioRepository:
    return InMemoryPortfolioRepository()


@pytest.fixture
def client(portfolio_repo, rate_cache, fixed_today) -> TestClient:
    """Provide FastAPI test client with in-memory portfolio and rate cache."""
    app.dependency_overrides[get_portfolio_repo] = lambda: portfolio_repo
    app.dependency_overrides[get_rate_cache] = lambda: rate_cache
    app.dependency_overrides[get_today] = lambda: fixed_today
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_series_close(
    actual: list[float],
    expected: list[float],
    tolerance: float = 1e-9,
) -> None:
    """Assert two float series are equal element-wise within tolerance."""
    assert len(actual) == len(expected), f"Length {len(actual)} != {len(expected)}"
    for i, (a, e) in enumerate(zip(actual, expected)):
        assert abs(a - e) <= tolerance, f"Index {i}: expected {e}, got {a}"

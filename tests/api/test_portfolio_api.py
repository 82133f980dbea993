"""
API tests for portfolio, ledger and rate cache endpoints.

Tests cover:
- Portfolio summary payload shape and alignment
- Unknown owner (404) and application error mapping
- Ledger category summary with date range
- Cached pair listing
- Health and root endpoints
"""

import pytest
from fastapi.testclient import TestClient

from networth.core.timezone import date_to_timestamp
from networth.domain.models import Record

from tests.conftest import CHF, EUR, day, make_account, make_ledger, make_portfolio


@pytest.fixture
def seeded_repo(portfolio_repo, scenario_portfolio):
    portfolio_repo.save(scenario_portfolio)
    return portfolio_repo


# =============================================================================
# PORTFOLIO SUMMARY TESTS
# =============================================================================


class TestPortfolioSummaryAPI:
    """Tests for GET /portfolio/summary."""

    def test_summary_shape(self, client: TestClient, seeded_repo):
        """
        GIVEN the two-account scenario portfolio
        WHEN I GET /portfolio/summary for its owner
        THEN balances, total, prediction and spend are returned
        """
        response = client.get("/portfolio/summary", params={"owner": "alice"})

        assert response.status_code == 200
        data = response.json()
        assert data["base_currency"] == "CHF"
        balances = data["total_balance"]["balances"]
        assert [b["id"] for b in balances] == ["a", "b"]
        assert all(b["currency"] == "CHF" for b in balances)
        assert set(data["total_prediction"]) == {"timestamps", "total", "prediction_timestamps", "prediction"}
        assert data["spend_per_month"] == {"months": {}}

    def test_series_are_aligned_with_timestamps(self, client: TestClient, seeded_repo):
        data = client.get("/portfolio/summary", params={"owner": "alice"}).json()

        timestamps = data["total_balance"]["timestamps"]
        assert timestamps
        for balance in data["total_balance"]["balances"]:
            assert len(balance["series"]) == len(timestamps)
        assert data["total_prediction"]["timestamps"] == timestamps
        assert len(data["total_prediction"]["total"]) == len(timestamps)
        assert len(data["total_prediction"]["prediction"]) == len(data["total_prediction"]["prediction_timestamps"])

    def test_timestamps_are_consecutive_days(self, client: TestClient, seeded_repo):
        timestamps = client.get("/portfolio/summary", params={"owner": "alice"}).json()["total_balance"]["timestamps"]

        assert timestamps[0] == date_to_timestamp(day(0))
        assert all(b - a == 86400 for a, b in zip(timestamps, timestamps[1:]))

    def test_unknown_owner_returns_404(self, client: TestClient, seeded_repo):
        response = client.get("/portfolio/summary", params={"owner": "mallory"})

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_default_owner_is_used(self, client: TestClient, portfolio_repo):
        portfolio_repo.save(make_portfolio(owner="default"))

        response = client.get("/portfolio/summary")

        assert response.status_code == 200
        assert response.json()["total_balance"] == {"balances": [], "timestamps": []}

    def test_spend_keys_are_month_then_year(self, client: TestClient, portfolio_repo):
        account = make_account(
            "card", CHF,
            [make_ledger(CHF, [Record(day(0), 100.0, "topup"), Record(day(1), -20.0, "food")])],
            spending=True,
        )
        portfolio_repo.save(make_portfolio(account))

        data = client.get("/portfolio/summary", params={"owner": "alice"}).json()

        assert data["spend_per_month"]["months"] == {"6": {"2024": {"food": 20.0}}}


# =============================================================================
# LEDGER SUMMARY TESTS
# =============================================================================


class TestLedgerSummaryAPI:
    """Tests for GET /ledgers/summary."""

    def test_category_totals_in_range(self, client: TestClient, portfolio_repo):
        account = make_account(
            "main", EUR,
            [make_ledger(EUR, [
                Record(day(0), 100.0, "salary"),
                Record(day(2), -10.0, "food"),
                Record(day(4), -20.0, "food"),
            ])],
        )
        portfolio_repo.save(make_portfolio(account))

        response = client.get(
            "/ledgers/summary",
            params={"owner": "alice", "from": day(1).isoformat(), "to": day(3).isoformat()},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["base_currency"] == "CHF"
        assert data["from_date"] == day(1).isoformat()
        assert data["accounts"]["main"] == pytest.approx({"food": -12.0})

    def test_reversed_range_returns_400(self, client: TestClient, seeded_repo):
        response = client.get("/ledgers/summary", params={"from": "2024-06-10", "to": "2024-06-01"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_invalid_date_returns_400(self, client: TestClient, seeded_repo):
        response = client.get("/ledgers/summary", params={"owner": "alice", "from": "not a date"})

        assert response.status_code == 400


# =============================================================================
# RATE CACHE TESTS
# =============================================================================


class TestFxPairsAPI:
    """Tests for GET /fx/pairs."""

    def test_lists_pairs_fetched_by_summary(self, client: TestClient, seeded_repo, fixed_today):
        client.get("/portfolio/summary", params={"owner": "alice"})

        response = client.get("/fx/pairs")

        assert response.status_code == 200
        pairs = response.json()
        assert [p["key"] for p in pairs] == ["EUR:CHF"]
        assert pairs[0]["latest_date"] == fixed_today.isoformat()

    def test_empty_cache(self, client: TestClient):
        assert client.get("/fx/pairs").json() == []


class TestMiscAPI:
    """Tests for health and root endpoints."""

    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client: TestClient):
        data = client.get("/").json()
        assert data["docs"] == "/docs"

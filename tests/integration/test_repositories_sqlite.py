"""
Integration tests for the SQLite portfolio repository.

Tests cover:
- Round trip of a full portfolio snapshot
- Replace-on-save semantics
- Owner listing
"""

from datetime import date

from networth.domain.models import LedgerKind, Record, Symbol
from networth.repositories.sqlalchemy import SqlAlchemyPortfolioRepository

from tests.conftest import CHF, USD, make_account, make_ledger, make_portfolio

AAPL = Symbol.instrument("AAPL")


def _portfolio(owner: str = "alice"):
    broker = make_account(
        "broker", USD,
        [
            make_ledger(USD, [Record(date(2024, 1, 2), 1000.0, "deposit", "Funding")]),
            make_ledger(AAPL, [Record(date(2024, 1, 3), 4.0, "buy", "Buy AAPL")], kind=LedgerKind.STOCK),
        ],
        name="Brokerage",
        initial_balance=50.0,
        initial_date=date(2024, 1, 1),
    )
    card = make_account(
        "card", CHF,
        [make_ledger(CHF, [Record(date(2024, 1, 5), -12.5, "food", "Lunch")])],
        name="Card",
        spending=True,
    )
    return make_portfolio(broker, card, owner=owner)


class TestSqlAlchemyPortfolioRepository:
    """Tests for SqlAlchemyPortfolioRepository."""

    def test_round_trip(self, test_session):
        """
        GIVEN a portfolio with a stock ledger and a spending account
        WHEN saved and loaded back
        THEN accounts, ledgers and records are preserved in order
        """
        repo = SqlAlchemyPortfolioRepository(test_session)
        original = _portfolio()

        repo.save(original)
        loaded = repo.get("alice")

        assert loaded.base_currency == CHF
        assert list(loaded.accounts) == ["broker", "card"]
        broker = loaded.accounts["broker"]
        assert broker.currency == USD
        assert broker.initial_balance == 50.0
        assert broker.initial_date == date(2024, 1, 1)
        assert [ledger.symbol for ledger in broker.ledgers] == [USD, AAPL]
        assert broker.ledgers[1].kind == LedgerKind.STOCK
        assert broker.ledgers[1].records == [Record(date(2024, 1, 3), 4.0, "buy", "Buy AAPL")]
        assert loaded.accounts["card"].spending is True
        assert loaded.accounts["card"].owner == "alice"

    def test_unknown_owner_returns_none(self, test_session):
        assert SqlAlchemyPortfolioRepository(test_session).get("nobody") is None

    def test_save_replaces_snapshot(self, test_session):
        repo = SqlAlchemyPortfolioRepository(test_session)
        repo.save(_portfolio())

        smaller = make_portfolio(make_account("cash", CHF, [make_ledger(CHF, [(date(2024, 2, 1), 5.0)])]))
        repo.save(smaller)
        loaded = repo.get("alice")

        assert list(loaded.accounts) == ["cash"]
        assert loaded.accounts["cash"].ledgers[0].records[0].amount == 5.0

    def test_list_owners(self, test_session):
        repo = SqlAlchemyPortfolioRepository(test_session)
        repo.save(_portfolio("bob"))
        repo.save(make_portfolio(owner="alice"))

        assert repo.list_owners() == ["alice", "bob"]

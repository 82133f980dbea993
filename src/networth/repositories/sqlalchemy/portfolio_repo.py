"""SQLAlchemy implementation of PortfolioRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from networth.domain.models import Account, Ledger, Portfolio, Record, Symbol
from networth.repositories.sqlalchemy.orm_models import (
    AccountORM,
    LedgerORM,
    PortfolioORM,
    RecordORM,
)


class SqlAlchemyPortfolioRepository:
    """SQLAlchemy-backed portfolio repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, owner: str) -> Optional[Portfolio]:
        """Load the full portfolio graph of an owner."""
        orm_portfolio = self._db.query(PortfolioORM).filter(
            PortfolioORM.owner == owner
        ).first()
        return self._to_domain(orm_portfolio) if orm_portfolio else None

    def save(self, portfolio: Portfolio) -> Portfolio:
        """Replace the stored portfolio of the owner with the given snapshot."""
        existing = self._db.query(PortfolioORM).filter(
            PortfolioORM.owner == portfolio.owner
        ).first()
        if existing is not None:
            self._db.delete(existing)
            self._db.flush()

        self._db.add(self._to_orm(portfolio))
        self._db.commit()
        return portfolio

    def list_owners(self) -> list[str]:
        """List owners with a stored portfolio."""
        rows = self._db.query(PortfolioORM.owner).order_by(PortfolioORM.owner).all()
        return [row[0] for row in rows]

    @staticmethod
    def _to_orm(portfolio: Portfolio) -> PortfolioORM:
        orm_portfolio = PortfolioORM(
            owner=portfolio.owner,
            base_currency=portfolio.base_currency.code,
        )
        for position, account in enumerate(portfolio.accounts.values()):
            orm_account = AccountORM(
                account_id=account.id,
                position=position,
                name=account.name,
                currency=account.currency.code,
                spending=account.spending,
                initial_balance=account.initial_balance,
                initial_date=account.initial_date,
            )
            for ledger in account.ledgers:
                orm_ledger = LedgerORM(
                    name=ledger.name,
                    symbol_kind=ledger.symbol.kind,
                    symbol_code=ledger.symbol.code,
                    kind=ledger.kind,
                )
                orm_ledger.records = [
                    RecordORM(
                        date=record.date,
                        amount=record.amount,
                        category=record.category,
                        description=record.description,
                    )
                    for record in ledger.records
                ]
                orm_account.ledgers.append(orm_ledger)
            orm_portfolio.accounts.append(orm_account)
        return orm_portfolio

    @staticmethod
    def _to_domain(orm: PortfolioORM) -> Portfolio:
        """Convert ORM graph to domain model."""
        accounts: dict[str, Account] = {}
        for orm_account in orm.accounts:
            ledgers = [
                Ledger(
                    name=orm_ledger.name,
                    symbol=Symbol(orm_ledger.symbol_kind, orm_ledger.symbol_code),
                    kind=orm_ledger.kind,
                    records=[
                        Record(
                            date=r.date,
                            amount=r.amount,
                            category=r.category or "",
                            description=r.description or "",
                        )
                        for r in orm_ledger.records
                    ],
                )
                for orm_ledger in orm_account.ledgers
            ]
            accounts[orm_account.account_id] = Account(
                id=orm_account.account_id,
                name=orm_account.name,
                currency=orm_account.currency,
                owner=orm.owner,
                ledgers=ledgers,
                spending=bool(orm_account.spending),
                initial_balance=orm_account.initial_balance,
                initial_date=orm_account.initial_date,
            )
        return Portfolio(owner=orm.owner, base_currency=orm.base_currency, accounts=accounts)

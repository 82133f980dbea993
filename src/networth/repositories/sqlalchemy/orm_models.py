"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
    Boolean,
    Text,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from networth.repositories.sqlalchemy.database import Base
from networth.domain.models.enums import LedgerKind, SymbolKind


class PortfolioORM(Base):
    """SQLAlchemy model for Portfolio."""

    __tablename__ = "portfolios"

    owner = Column(String(255), primary_key=True)
    base_currency = Column(String(3), nullable=False)

    accounts = relationship(
        "AccountORM",
        back_populates="portfolio",
        cascade="all, delete-orphan",
        order_by="AccountORM.position",
    )


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    account_id = Column(String(64), primary_key=True)
    owner = Column(String(255), ForeignKey("portfolios.owner"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    currency = Column(String(3), nullable=False)
    spending = Column(Boolean, nullable=False, default=False)
    initial_balance = Column(Float, nullable=True)
    initial_date = Column(Date, nullable=True)

    portfolio = relationship("PortfolioORM", back_populates="accounts")
    ledgers = relationship(
        "LedgerORM",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="LedgerORM.ledger_id",
    )


class LedgerORM(Base):
    """SQLAlchemy model for a Ledger inside an account."""

    __tablename__ = "ledgers"

    ledger_id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(String(64), ForeignKey("accounts.account_id"), nullable=False)
    name = Column(String(255), nullable=False)
    symbol_kind = Column(SqlEnum(SymbolKind), nullable=False)
    symbol_code = Column(String(20), nullable=False)
    kind = Column(SqlEnum(LedgerKind), nullable=False, default=LedgerKind.BANK)

    account = relationship("AccountORM", back_populates="ledgers")
    records = relationship(
        "RecordORM",
        back_populates="ledger",
        cascade="all, delete-orphan",
        order_by="RecordORM.record_id",
    )


class RecordORM(Base):
    """SQLAlchemy model for a ledger Record."""

    __tablename__ = "records"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    ledger_id = Column(Integer, ForeignKey("ledgers.ledger_id"), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(Float, nullable=False)
    category = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")

    ledger = relationship("LedgerORM", back_populates="records")

"""SQLAlchemy persistence for portfolio snapshots."""

from networth.repositories.sqlalchemy.database import (
    Base,
    get_db,
    get_session,
    init_db,
    reset_database,
)
from networth.repositories.sqlalchemy.portfolio_repo import SqlAlchemyPortfolioRepository

__all__ = [
    "Base",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "SqlAlchemyPortfolioRepository",
]

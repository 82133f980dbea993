"""Dependency injection for FastAPI."""

from datetime import date

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from networth.app_context import AppContext
from networth.config.settings import get_settings
from networth.core.timezone import today_local
from networth.repositories.protocols import PortfolioRepository
from networth.repositories.sqlalchemy import SqlAlchemyPortfolioRepository, get_db
from networth.services import PortfolioSummaryService, RateCache


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext built in the application lifespan."""
    return request.app.state.context


def get_rate_cache(context: AppContext = Depends(get_app_context)) -> RateCache:
    """Provide the process-wide RateCache."""
    return context.rate_cache


def get_portfolio_repo(db: Session = Depends(get_db)) -> PortfolioRepository:
    """Provide PortfolioRepository instance."""
    return SqlAlchemyPortfolioRepository(db)


def get_summary_service(
    rate_cache: RateCache = Depends(get_rate_cache),
) -> PortfolioSummaryService:
    """Provide PortfolioSummaryService instance."""
    return PortfolioSummaryService.from_settings(rate_cache, get_settings())


def get_today() -> date:
    """Provide the current local calendar day."""
    return today_local()

"""Portfolio summary endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from networth.api.deps import get_portfolio_repo, get_summary_service, get_today
from networth.api.schemas import PortfolioSummaryResponse
from networth.config.settings import get_settings
from networth.core.exceptions import NotFoundError
from networth.repositories.protocols import PortfolioRepository
from networth.services import PortfolioSummaryService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("/summary", response_model=PortfolioSummaryResponse)
def get_portfolio_summary(
    owner: Optional[str] = Query(None, description="Portfolio owner (default owner if empty)"),
    repo: PortfolioRepository = Depends(get_portfolio_repo),
    service: PortfolioSummaryService = Depends(get_summary_service),
    today: date = Depends(get_today),
) -> PortfolioSummaryResponse:
    """Balances, total, trend prediction and monthly spend in the base currency."""
    owner = owner or get_settings().default_owner
    portfolio = repo.get(owner)
    if portfolio is None:
        raise NotFoundError("Portfolio", owner)

    summary = service.summarize(portfolio, today=today)
    return PortfolioSummaryResponse.from_summary(summary)

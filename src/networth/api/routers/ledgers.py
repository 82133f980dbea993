"""Ledger category summary endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from networth.api.deps import get_portfolio_repo, get_summary_service
from networth.api.schemas import LedgerSummaryResponse
from networth.config.settings import get_settings
from networth.core.exceptions import NotFoundError, ValidationError
from networth.core.timezone import parse_date
from networth.repositories.protocols import PortfolioRepository
from networth.services import PortfolioSummaryService

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


def _parse_query_date(name: str, value: Optional[str]):
    try:
        return parse_date(value)
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"Invalid '{name}' date: {value!r}") from exc


@router.get("/summary", response_model=LedgerSummaryResponse)
def get_ledger_summary(
    owner: Optional[str] = Query(None, description="Portfolio owner (default owner if empty)"),
    from_date: Optional[str] = Query(None, alias="from", description="ISO date, inclusive"),
    to_date: Optional[str] = Query(None, alias="to", description="ISO date, inclusive"),
    repo: PortfolioRepository = Depends(get_portfolio_repo),
    service: PortfolioSummaryService = Depends(get_summary_service),
) -> LedgerSummaryResponse:
    """Signed category totals per account within an optional date range."""
    owner = owner or get_settings().default_owner
    start = _parse_query_date("from", from_date)
    end = _parse_query_date("to", to_date)
    if start is not None and end is not None and end < start:
        raise ValidationError(f"'to' ({end}) is before 'from' ({start})")

    portfolio = repo.get(owner)
    if portfolio is None:
        raise NotFoundError("Portfolio", owner)

    return LedgerSummaryResponse(
        base_currency=portfolio.base_currency.code,
        from_date=start,
        to_date=end,
        accounts=service.category_totals(portfolio, start, end),
    )

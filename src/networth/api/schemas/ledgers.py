"""Pydantic schemas for ledger summary endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel


class LedgerSummaryResponse(BaseModel):
    """Signed per-category totals per account, in the base currency."""

    base_currency: str
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    accounts: dict[str, dict[str, float]]

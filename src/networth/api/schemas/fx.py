"""Pydantic schemas for rate cache endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel


class PairResponse(BaseModel):
    """Response schema for one cached rate pair."""

    key: str
    from_code: str
    to_code: str
    latest_date: Optional[date] = None
    points: int

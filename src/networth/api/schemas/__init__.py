"""API request/response schemas."""

from networth.api.schemas.portfolio import (
    PortfolioLedgerData,
    PortfolioLedgersData,
    TotalPredictionData,
    SpendPerMonthResponse,
    PortfolioSummaryResponse,
)
from networth.api.schemas.ledgers import LedgerSummaryResponse
from networth.api.schemas.fx import PairResponse

__all__ = [
    "PortfolioLedgerData",
    "PortfolioLedgersData",
    "TotalPredictionData",
    "SpendPerMonthResponse",
    "PortfolioSummaryResponse",
    "LedgerSummaryResponse",
    "PairResponse",
]

"""Pydantic schemas for portfolio summary endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from networth.core.timezone import date_to_timestamp
from networth.domain.views import PortfolioSummary
from networth.services.date_series import to_timestamps


class PortfolioLedgerData(BaseModel):
    """Balance series of one account in the base currency."""

    id: str
    name: str
    currency: str
    series: list[float]


class PortfolioLedgersData(BaseModel):
    """Per-account series aligned on `timestamps` (unix seconds)."""

    balances: list[PortfolioLedgerData]
    timestamps: list[int]


class TotalPredictionData(BaseModel):
    """Portfolio total plus its linear trend projection."""

    timestamps: list[int]
    total: list[float]
    prediction_timestamps: list[int]
    prediction: list[float]


class SpendPerMonthResponse(BaseModel):
    """Spend as month -> year -> category -> amount."""

    months: dict[int, dict[int, dict[str, float]]]


class PortfolioSummaryResponse(BaseModel):
    """Response schema for GET /portfolio/summary."""

    base_currency: str
    as_of: Optional[date] = None
    total_balance: PortfolioLedgersData
    total_prediction: TotalPredictionData
    spend_per_month: SpendPerMonthResponse

    @classmethod
    def from_summary(cls, summary: PortfolioSummary) -> "PortfolioSummaryResponse":
        timestamps = to_timestamps(summary.dates)
        return cls(
            base_currency=summary.base_currency,
            as_of=summary.as_of,
            total_balance=PortfolioLedgersData(
                balances=[
                    PortfolioLedgerData(
                        id=b.id,
                        name=b.name,
                        currency=b.currency,
                        series=b.series,
                    )
                    for b in summary.balances
                ],
                timestamps=timestamps,
            ),
            total_prediction=TotalPredictionData(
                timestamps=timestamps,
                total=summary.total,
                prediction_timestamps=[date_to_timestamp(d) for d in summary.prediction_dates],
                prediction=summary.prediction,
            ),
            spend_per_month=SpendPerMonthResponse(months=summary.spend_per_month),
        )

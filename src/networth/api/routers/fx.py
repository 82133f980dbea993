"""Rate cache diagnostics."""

from fastapi import APIRouter, Depends

from networth.api.deps import get_rate_cache
from networth.api.schemas import PairResponse
from networth.services import RateCache

router = APIRouter(prefix="/fx", tags=["fx"])


@router.get("/pairs", response_model=list[PairResponse])
def list_pairs(rate_cache: RateCache = Depends(get_rate_cache)) -> list[PairResponse]:
    """List cached rate pairs without refreshing them."""
    return [
        PairResponse(
            key=info.key,
            from_code=info.from_code,
            to_code=info.to_code,
            latest_date=info.latest_date,
            points=info.points,
        )
        for info in rate_cache.pairs()
    ]

"""API routers package."""

from networth.api.routers.portfolio import router as portfolio_router
from networth.api.routers.ledgers import router as ledgers_router
from networth.api.routers.fx import router as fx_router

__all__ = [
    "portfolio_router",
    "ledgers_router",
    "fx_router",
]

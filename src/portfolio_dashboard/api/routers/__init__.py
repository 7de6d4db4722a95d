"""API routers package."""

from portfolio_dashboard.api.routers.portfolio import router as portfolio_router
from portfolio_dashboard.api.routers.stocks import router as stocks_router

__all__ = [
    "portfolio_router",
    "stocks_router",
]

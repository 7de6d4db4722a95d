"""Pydantic schemas for API request/response."""

from portfolio_dashboard.api.schemas.base import ApiResponse, CamelModel
from portfolio_dashboard.api.schemas.portfolio import (
    StockResponse,
    SectorSummaryResponse,
    PortfolioSnapshotResponse,
)
from portfolio_dashboard.api.schemas.stock import QuoteResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "StockResponse",
    "SectorSummaryResponse",
    "PortfolioSnapshotResponse",
    "QuoteResponse",
]

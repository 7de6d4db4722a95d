"""Pydantic schemas for portfolio endpoints."""

from dataclasses import asdict
from datetime import datetime
from typing import Optional

from portfolio_dashboard.api.schemas.base import CamelModel
from portfolio_dashboard.domain.models import Holding
from portfolio_dashboard.domain.views import PortfolioSnapshot, SectorSummary


class StockResponse(CamelModel):
    """A holding with its (static or live-enriched) market fields."""

    id: int
    name: str
    purchase_price: float
    quantity: float
    investment: float
    portfolio_percent: float
    symbol: str
    cmp: float
    present_value: float
    gain_loss: float
    gain_loss_percent: float
    market_cap: float
    pe_ratio: float
    latest_earnings: float
    sector: str

    @classmethod
    def from_holding(cls, holding: Holding) -> "StockResponse":
        return cls(**asdict(holding))


class SectorSummaryResponse(CamelModel):
    """Per-sector rollup."""

    sector: str
    total_investment: float
    total_present_value: float
    total_gain_loss: float
    gain_loss_percent: float
    stock_count: int

    @classmethod
    def from_summary(cls, summary: SectorSummary) -> "SectorSummaryResponse":
        return cls(**asdict(summary))


class PortfolioSnapshotResponse(CamelModel):
    """Live portfolio: enriched stocks, sector rollups and totals."""

    stocks: list[StockResponse]
    sector_summaries: list[SectorSummaryResponse]
    total_investment: float
    total_present_value: float
    total_gain_loss: float
    generated_at: Optional[datetime] = None

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "PortfolioSnapshotResponse":
        return cls(
            stocks=[StockResponse.from_holding(s) for s in snapshot.stocks],
            sector_summaries=[
                SectorSummaryResponse.from_summary(s) for s in snapshot.sector_summaries
            ],
            total_investment=snapshot.total_investment,
            total_present_value=snapshot.total_present_value,
            total_gain_loss=snapshot.total_gain_loss,
            generated_at=snapshot.generated_at,
        )

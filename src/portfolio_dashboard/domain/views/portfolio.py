"""View models for portfolio aggregation outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from portfolio_dashboard.domain.models import Holding


@dataclass
class SectorSummary:
    """Rollup of enriched holdings sharing a sector."""

    sector: str
    stock_count: int = 0
    total_investment: float = 0.0
    total_present_value: float = 0.0
    total_gain_loss: float = 0.0
    gain_loss_percent: float = 0.0


@dataclass
class PortfolioSnapshot:
    """Enriched portfolio for one request. Never persisted."""

    stocks: list[Holding] = field(default_factory=list)
    sector_summaries: list[SectorSummary] = field(default_factory=list)
    total_investment: float = 0.0
    total_present_value: float = 0.0
    total_gain_loss: float = 0.0
    generated_at: Optional[datetime] = None

"""View models package."""

from portfolio_dashboard.domain.views.portfolio import SectorSummary, PortfolioSnapshot

__all__ = [
    "SectorSummary",
    "PortfolioSnapshot",
]

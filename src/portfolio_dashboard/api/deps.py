"""Dependency injection for FastAPI."""

from fastapi import Depends

from portfolio_dashboard.app_context import AppContext, get_app_context
from portfolio_dashboard.domain.models import Holding
from portfolio_dashboard.services import (
    BatchEnrichmentEngine,
    MarketDataService,
    PortfolioAggregator,
)


def get_context() -> AppContext:
    """Provide the application context."""
    return get_app_context()


def get_holdings(context: AppContext = Depends(get_context)) -> list[Holding]:
    """Provide the static holdings."""
    return context.holdings


def get_batch_engine(context: AppContext = Depends(get_context)) -> BatchEnrichmentEngine:
    """Provide BatchEnrichmentEngine instance."""
    return context.engine


def get_market_data_service(context: AppContext = Depends(get_context)) -> MarketDataService:
    """Provide MarketDataService instance."""
    return context.market_data


def get_portfolio_aggregator(context: AppContext = Depends(get_context)) -> PortfolioAggregator:
    """Provide PortfolioAggregator instance."""
    return context.aggregator

"""Service layer - quote resolution and portfolio aggregation."""

from portfolio_dashboard.services.quote_adapter import QuoteProviderAdapter, normalize_symbol
from portfolio_dashboard.services.batch_enrichment import BatchEnrichmentEngine
from portfolio_dashboard.services.portfolio_aggregator import PortfolioAggregator
from portfolio_dashboard.services.market_data_service import MarketDataService
from portfolio_dashboard.services.sector_classifier import classify_sector
from portfolio_dashboard.services.holdings_loader import load_holdings

__all__ = [
    "QuoteProviderAdapter",
    "normalize_symbol",
    "BatchEnrichmentEngine",
    "PortfolioAggregator",
    "MarketDataService",
    "classify_sector",
    "load_holdings",
]

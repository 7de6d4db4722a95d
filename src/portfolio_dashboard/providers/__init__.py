"""Market data providers module."""

from portfolio_dashboard.providers.market_data_provider import MarketDataProvider
from portfolio_dashboard.providers.stub_provider import StubMarketDataProvider
from portfolio_dashboard.providers.yahoo_provider import YahooFinanceProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
    "YahooFinanceProvider",
]

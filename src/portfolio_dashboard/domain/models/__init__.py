"""Domain models package."""

from portfolio_dashboard.domain.models.enums import QuoteSource, CacheNamespace
from portfolio_dashboard.domain.models.holding import Holding, DEFAULT_SECTOR
from portfolio_dashboard.domain.models.quote import PriceQuote, Quote, QuoteMetrics
from portfolio_dashboard.domain.models.cache import CacheEntry

__all__ = [
    "QuoteSource",
    "CacheNamespace",
    "Holding",
    "DEFAULT_SECTOR",
    "PriceQuote",
    "Quote",
    "QuoteMetrics",
    "CacheEntry",
]

"""Repository layer - cache abstractions and implementations."""

from portfolio_dashboard.repositories.protocols import QuoteCache, make_cache_key
from portfolio_dashboard.repositories.memory import InMemoryQuoteCache

__all__ = [
    "QuoteCache",
    "make_cache_key",
    "InMemoryQuoteCache",
]

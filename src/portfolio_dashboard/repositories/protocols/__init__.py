"""Repository protocols (interfaces)."""

from portfolio_dashboard.repositories.protocols.cache_repo import QuoteCache, make_cache_key

__all__ = [
    "QuoteCache",
    "make_cache_key",
]

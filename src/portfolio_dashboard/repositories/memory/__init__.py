"""In-memory repository implementations."""

from portfolio_dashboard.repositories.memory.cache_repo import InMemoryQuoteCache

__all__ = [
    "InMemoryQuoteCache",
]

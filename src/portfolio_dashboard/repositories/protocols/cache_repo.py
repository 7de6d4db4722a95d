"""Quote cache protocol."""

from typing import Any, Optional, Protocol

from portfolio_dashboard.domain.models import CacheNamespace


def make_cache_key(namespace: CacheNamespace, symbol: str) -> str:
    """Build a cache key such as 'full:RELIANCE'."""
    return f"{namespace.value}:{symbol}"


class QuoteCache(Protocol):
    """Interface for a key-value store with per-entry TTL."""

    def get(self, key: str, allow_expired: bool = False) -> Optional[Any]:
        """
        Return the value stored under key, or None.

        Expired entries read as None unless allow_expired is set; only the
        provider-failure fallback path passes allow_expired=True.
        """
        ...

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store value under key, expiring ttl_seconds from now."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...

    def clear(self) -> None:
        """Remove all entries."""
        ...

"""In-memory implementation of QuoteCache."""

import threading
import time
from typing import Any, Callable, Optional

from portfolio_dashboard.domain.models import CacheEntry


class InMemoryQuoteCache:
    """
    Dict-backed TTL cache.

    Expired entries are kept until overwritten so the provider-failure path
    can still serve them with allow_expired=True. Key cardinality is bounded
    by the portfolio's symbol count, so there is no eviction.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str, allow_expired: bool = False) -> Optional[Any]:
        """Return the cached value, or None if absent (or expired)."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not allow_expired and entry.is_expired(self._clock()):
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store value with a TTL counted from now."""
        with self._lock:
            self._entries[key] = CacheEntry(
                value=value,
                expires_at=self._clock() + ttl_seconds,
            )

    def delete(self, key: str) -> None:
        """Remove key if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

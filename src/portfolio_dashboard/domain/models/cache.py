"""Cache entry model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class CacheEntry:
    """Cached value with its absolute expiry on the cache's monotonic clock."""

    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Return True once the entry's TTL has elapsed."""
        return now >= self.expires_at

"""Enumerations for domain models."""

from enum import Enum


class QuoteSource(str, Enum):
    """Where a quote's values came from."""

    LIVE = "live"  # Fresh provider response
    STALE = "stale"  # Expired cache entry served after a provider failure
    MOCK = "mock"  # Synthesized after a provider failure with nothing cached


class CacheNamespace(str, Enum):
    """Key prefixes for the quote cache."""

    PRICE = "price"
    METRICS = "metrics"
    FULL = "full"

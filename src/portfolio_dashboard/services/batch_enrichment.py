"""Batch enrichment engine: sequential, paced quote resolution."""

import logging
import time
from typing import Callable

from portfolio_dashboard.core.exceptions import ValidationError
from portfolio_dashboard.domain.models import CacheNamespace, Quote, QuoteSource
from portfolio_dashboard.repositories.protocols import QuoteCache, make_cache_key
from portfolio_dashboard.services.quote_adapter import QuoteProviderAdapter

logger = logging.getLogger(__name__)

DEFAULT_FULL_QUOTE_TTL_SECONDS = 120.0
DEFAULT_PACING_DELAY_SECONDS = 0.5


class BatchEnrichmentEngine:
    """
    Resolves quotes for many symbols one at a time.

    Symbols are processed strictly in order to stay under the upstream rate
    limit: a pacing delay separates consecutive provider calls within a batch,
    and cache hits neither call the provider nor wait. Provider failures are
    absorbed by the adapter and never seen here.
    """

    def __init__(
        self,
        adapter: QuoteProviderAdapter,
        cache: QuoteCache,
        full_quote_ttl_seconds: float = DEFAULT_FULL_QUOTE_TTL_SECONDS,
        pacing_delay_seconds: float = DEFAULT_PACING_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._adapter = adapter
        self._cache = cache
        self._full_quote_ttl = full_quote_ttl_seconds
        self._pacing_delay = pacing_delay_seconds
        self._sleep = sleep

    def resolve_all(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Return a quote for every symbol, keyed by the stripped symbol.

        Raises ValidationError if symbols is not a list of non-blank strings.
        """
        validated = validate_symbols(symbols)

        results: dict[str, Quote] = {}
        upstream_calls = 0

        for symbol in validated:
            if symbol in results:
                continue

            cached = self._cache.get(make_cache_key(CacheNamespace.FULL, symbol))
            if cached is not None:
                logger.debug("Cache hit for %s", symbol)
                results[symbol] = cached
                continue

            # Pace consecutive upstream calls to prevent 429 Too Many Requests
            if upstream_calls > 0 and self._pacing_delay > 0:
                self._sleep(self._pacing_delay)
            upstream_calls += 1

            quote = self._adapter.fetch_quote(symbol)
            if quote.source == QuoteSource.LIVE:
                self._store(quote)
            results[symbol] = quote

        logger.info(
            "Resolved %d symbols (%d upstream calls)", len(results), upstream_calls
        )
        return results

    def _store(self, quote: Quote) -> None:
        """Cache a live quote under full, price and metrics keys."""
        ttl = self._full_quote_ttl
        self._cache.set(make_cache_key(CacheNamespace.FULL, quote.symbol), quote, ttl)
        # Narrower caches used by single-symbol lookups
        self._cache.set(make_cache_key(CacheNamespace.PRICE, quote.symbol), quote.price_quote, ttl)
        self._cache.set(make_cache_key(CacheNamespace.METRICS, quote.symbol), quote.metrics, ttl)


def validate_symbols(symbols: list[str]) -> list[str]:
    """Check symbols is a list of non-blank strings and strip each one."""
    if not isinstance(symbols, list):
        raise ValidationError("symbols array is required")
    validated = []
    for symbol in symbols:
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValidationError(f"Invalid symbol: {symbol!r}")
        validated.append(symbol.strip())
    return validated

"""Market data service for single-symbol lookups."""

import logging

from portfolio_dashboard.core.exceptions import ValidationError
from portfolio_dashboard.domain.models import (
    CacheNamespace,
    PriceQuote,
    Quote,
    QuoteMetrics,
    QuoteSource,
)
from portfolio_dashboard.repositories.protocols import QuoteCache, make_cache_key
from portfolio_dashboard.services.batch_enrichment import BatchEnrichmentEngine
from portfolio_dashboard.services.quote_adapter import QuoteProviderAdapter

logger = logging.getLogger(__name__)

DEFAULT_PRICE_TTL_SECONDS = 15.0
DEFAULT_METRICS_TTL_SECONDS = 60.0


class MarketDataService:
    """
    Service for fetching market data for one symbol at a time.

    Price and metrics have their own cache namespaces and TTLs; batch
    resolution backfills both, so a dashboard refresh warms these lookups.
    """

    def __init__(
        self,
        adapter: QuoteProviderAdapter,
        cache: QuoteCache,
        engine: BatchEnrichmentEngine,
        price_ttl_seconds: float = DEFAULT_PRICE_TTL_SECONDS,
        metrics_ttl_seconds: float = DEFAULT_METRICS_TTL_SECONDS,
    ):
        self._adapter = adapter
        self._cache = cache
        self._engine = engine
        self._price_ttl = price_ttl_seconds
        self._metrics_ttl = metrics_ttl_seconds

    def get_quote(self, symbol: str) -> Quote:
        """Return a full quote, shared with the batch cache."""
        symbol = _validate_symbol(symbol)
        return self._engine.resolve_all([symbol])[symbol]

    def get_price(self, symbol: str) -> PriceQuote:
        """Return the current market price for symbol."""
        symbol = _validate_symbol(symbol)
        key = make_cache_key(CacheNamespace.PRICE, symbol)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", symbol)
            return cached

        price = self._adapter.fetch_price(symbol)
        if price.source == QuoteSource.LIVE:
            self._cache.set(key, price, self._price_ttl)
        return price

    def get_quote_metrics(self, symbol: str) -> QuoteMetrics:
        """Return P/E ratio, latest earnings and market cap for symbol."""
        symbol = _validate_symbol(symbol)
        key = make_cache_key(CacheNamespace.METRICS, symbol)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for metrics %s", symbol)
            return cached

        metrics = self._adapter.fetch_metrics(symbol)
        if metrics.source == QuoteSource.LIVE:
            self._cache.set(key, metrics, self._metrics_ttl)
        return metrics

    def get_stock_data(self, symbol: str) -> Quote:
        """
        Combine the price and metrics lookups into one quote.

        The result is LIVE only when both parts are; otherwise it carries
        the price's fallback source, or the metrics' when the price is live.
        """
        price = self.get_price(symbol)
        metrics = self.get_quote_metrics(symbol)
        source = price.source if price.source != QuoteSource.LIVE else metrics.source
        return Quote(
            symbol=price.symbol,
            price=price.price,
            pe_ratio=metrics.pe_ratio,
            latest_earnings=metrics.latest_earnings,
            market_cap=metrics.market_cap,
            source=source,
            as_of=price.as_of,
        )


def _validate_symbol(symbol: str) -> str:
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValidationError(f"Invalid symbol: {symbol!r}")
    return symbol.strip()

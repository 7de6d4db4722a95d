"""Application context for in-process service management.

Builds the quote cache, provider, adapter, batch engine and aggregator
explicitly from settings. The HTTP layer reaches services only through here.
"""

import logging
import random
import time
from typing import Callable, Optional

from portfolio_dashboard.config.settings import Settings, get_settings
from portfolio_dashboard.domain.models import Holding
from portfolio_dashboard.providers import (
    MarketDataProvider,
    StubMarketDataProvider,
    YahooFinanceProvider,
)
from portfolio_dashboard.repositories import InMemoryQuoteCache, QuoteCache
from portfolio_dashboard.services import (
    BatchEnrichmentEngine,
    MarketDataService,
    PortfolioAggregator,
    QuoteProviderAdapter,
    load_holdings,
)

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> MarketDataProvider:
    """Construct the market data provider named in settings."""
    if settings.market_data_provider == "stub":
        return StubMarketDataProvider()
    return YahooFinanceProvider(fetch_timeout_seconds=settings.provider_timeout_seconds)


class AppContext:
    """
    Application context providing access to all services.

    Everything is constructed eagerly; start() then starts the provider and
    loads holdings. Until the provider is ready every quote resolves to
    stale or mock data.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[MarketDataProvider] = None,
        cache: Optional[QuoteCache] = None,
        holdings: Optional[list[Holding]] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self._settings = settings or get_settings()
        s = self._settings

        self._provider = provider or create_provider(s)
        self._cache = cache if cache is not None else InMemoryQuoteCache()
        self._holdings = holdings

        self._adapter = QuoteProviderAdapter(
            provider=self._provider,
            cache=self._cache,
            rng=rng or random.Random(s.mock_seed),
            mock_quote_ttl_seconds=s.mock_quote_ttl_seconds,
            mock_price_ttl_seconds=s.mock_price_ttl_seconds,
            mock_metrics_ttl_seconds=s.mock_metrics_ttl_seconds,
        )
        self._engine = BatchEnrichmentEngine(
            adapter=self._adapter,
            cache=self._cache,
            full_quote_ttl_seconds=s.full_quote_ttl_seconds,
            pacing_delay_seconds=s.batch_pacing_delay_seconds,
            sleep=sleep,
        )
        self._market_data = MarketDataService(
            adapter=self._adapter,
            cache=self._cache,
            engine=self._engine,
            price_ttl_seconds=s.price_ttl_seconds,
            metrics_ttl_seconds=s.metrics_ttl_seconds,
        )
        self._aggregator = PortfolioAggregator(engine=self._engine)

    def start(self) -> None:
        """Start the provider and load holdings (idempotent)."""
        self._provider.start()
        if self._holdings is None:
            self._holdings = load_holdings(self._settings.get_holdings_file())
        logger.info(
            "Context started: provider=%s ready=%s holdings=%d",
            type(self._provider).__name__,
            self._provider.is_ready,
            len(self._holdings),
        )

    @property
    def is_ready(self) -> bool:
        """True once the provider is ready to serve live quotes."""
        return self._provider.is_ready

    @property
    def cache(self) -> QuoteCache:
        return self._cache

    @property
    def adapter(self) -> QuoteProviderAdapter:
        return self._adapter

    @property
    def engine(self) -> BatchEnrichmentEngine:
        return self._engine

    @property
    def market_data(self) -> MarketDataService:
        return self._market_data

    @property
    def aggregator(self) -> PortfolioAggregator:
        return self._aggregator

    @property
    def holdings(self) -> list[Holding]:
        """Static holdings, loaded on first access if start() has not run."""
        if self._holdings is None:
            self._holdings = load_holdings(self._settings.get_holdings_file())
        return self._holdings


# Global application context (created on first use)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context

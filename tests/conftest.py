"""
Pytest configuration and fixtures for portfolio dashboard tests.

This module provides:
- A controllable clock and a recording sleep for cache/pacing tests
- Counting and failing market data providers
- Service fixtures wired the way AppContext wires them
- Holding factories and an API test client
"""

import random
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from portfolio_dashboard.app_context import AppContext, set_app_context
from portfolio_dashboard.config.settings import Settings, reset_settings
from portfolio_dashboard.core.exceptions import ProviderNotReadyError
from portfolio_dashboard.domain.models import Holding
from portfolio_dashboard.main import app
from portfolio_dashboard.repositories import InMemoryQuoteCache
from portfolio_dashboard.services import (
    BatchEnrichmentEngine,
    MarketDataService,
    PortfolioAggregator,
    QuoteProviderAdapter,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleeper:
    """Replacement for time.sleep that records requested delays."""

    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


DEFAULT_PAYLOADS: dict[str, dict[str, Any]] = {
    "ABC.NS": {
        "regularMarketPrice": 120.0,
        "trailingPE": 20.0,
        "epsTrailingTwelveMonths": 6.0,
        "marketCap": 5000000000.0,
    },
    "RELIANCE.NS": {
        "regularMarketPrice": 2950.5,
        "trailingPE": 27.3,
        "epsTrailingTwelveMonths": 108.1,
        "marketCap": 19960000000000.0,
    },
    "500325.BO": {
        "currentPrice": 2948.0,
        "forwardPE": 24.9,
        "epsCurrentYear": 118.4,
        "marketCap": 19940000000000.0,
    },
    "INFY.NS": {
        "regularMarketPrice": 1520.25,
        "trailingPE": 23.5,
        "trailingEps": 64.7,
        "marketCap": 6310000000000.0,
    },
}


class CountingProvider:
    """
    Deterministic provider that records every upstream call.

    Set fail=True to make subsequent calls raise ConnectionError.
    """

    def __init__(self, payloads: Optional[dict[str, dict[str, Any]]] = None):
        self.payloads = dict(DEFAULT_PAYLOADS if payloads is None else payloads)
        self.calls: list[str] = []
        self.fail = False
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def start(self) -> None:
        self._ready = True

    def fetch_quote(self, provider_symbol: str) -> dict[str, Any]:
        if not self._ready:
            raise ProviderNotReadyError(provider_symbol)
        self.calls.append(provider_symbol)
        if self.fail:
            raise ConnectionError("Network unavailable")
        return dict(self.payloads.get(provider_symbol, {"regularMarketPrice": 100.0}))


class FailingProvider:
    """Market provider that always raises an exception."""

    def __init__(self):
        self.calls: list[str] = []

    @property
    def is_ready(self) -> bool:
        return True

    def start(self) -> None:
        pass

    def fetch_quote(self, provider_symbol: str) -> dict[str, Any]:
        self.calls.append(provider_symbol)
        raise ConnectionError("Network unavailable")


@pytest.fixture
def counting_provider() -> CountingProvider:
    """Provide a started counting provider."""
    provider = CountingProvider()
    provider.start()
    return provider


@pytest.fixture
def failing_provider() -> FailingProvider:
    """Provide a market provider that always fails."""
    return FailingProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def quote_cache(fake_clock) -> InMemoryQuoteCache:
    """Provide an empty cache driven by the fake clock."""
    return InMemoryQuoteCache(clock=fake_clock)


@pytest.fixture
def adapter(counting_provider, quote_cache) -> QuoteProviderAdapter:
    """Provide a QuoteProviderAdapter with a seeded mock generator."""
    return QuoteProviderAdapter(
        provider=counting_provider,
        cache=quote_cache,
        rng=random.Random(42),
    )


@pytest.fixture
def failing_adapter(failing_provider, quote_cache) -> QuoteProviderAdapter:
    """Provide a QuoteProviderAdapter whose provider always fails."""
    return QuoteProviderAdapter(
        provider=failing_provider,
        cache=quote_cache,
        rng=random.Random(42),
    )


@pytest.fixture
def engine(adapter, quote_cache, sleeper) -> BatchEnrichmentEngine:
    """Provide a BatchEnrichmentEngine that records pacing delays."""
    return BatchEnrichmentEngine(
        adapter=adapter,
        cache=quote_cache,
        full_quote_ttl_seconds=120,
        pacing_delay_seconds=0.5,
        sleep=sleeper,
    )


@pytest.fixture
def market_data_service(adapter, quote_cache, engine) -> MarketDataService:
    """Provide MarketDataService sharing the engine's cache."""
    return MarketDataService(
        adapter=adapter,
        cache=quote_cache,
        engine=engine,
        price_ttl_seconds=15,
        metrics_ttl_seconds=60,
    )


@pytest.fixture
def aggregator(engine) -> PortfolioAggregator:
    """Provide PortfolioAggregator with the default keyword classifier."""
    return PortfolioAggregator(engine=engine)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


def make_holding(
    symbol: str = "ABC",
    name: str = "ABC Industries",
    quantity: float = 10,
    investment: float = 1000,
    holding_id: int = 1,
    **overrides: Any,
) -> Holding:
    """Helper to create a Holding with sensible static fields."""
    purchase_price = investment / quantity if quantity else 0
    fields: dict[str, Any] = {
        "purchase_price": purchase_price,
        "cmp": purchase_price,
        "present_value": investment,
        "pe_ratio": 15.0,
        "latest_earnings": 8.0,
        "market_cap": 2500.0,
    }
    fields.update(overrides)
    return Holding(
        id=holding_id,
        name=name,
        symbol=symbol,
        quantity=quantity,
        investment=investment,
        **fields,
    )


@pytest.fixture
def holding_factory() -> Callable[..., Holding]:
    """Factory for creating test holdings."""
    return make_holding


@pytest.fixture
def sample_holdings() -> list[Holding]:
    """Small mixed-sector portfolio."""
    return [
        make_holding("HDFCBANK", "HDFC Bank", quantity=10, investment=15000, holding_id=1),
        make_holding("RELIANCE", "Reliance Industries", quantity=5, investment=12500, holding_id=2),
        make_holding("INFY", "Infosys Tech", quantity=20, investment=28000, holding_id=3),
        make_holding("500325", "Bajaj Housing Finance", quantity=4, investment=10000, holding_id=4),
    ]


# =============================================================================
# API CLIENT
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for API tests: stub provider, seeded mocks."""
    return Settings(
        market_data_provider="stub",
        batch_pacing_delay_seconds=0.5,
        mock_seed=7,
    )


@pytest.fixture
def app_context(
    test_settings,
    counting_provider,
    quote_cache,
    sample_holdings,
    sleeper,
) -> AppContext:
    """Provide an AppContext wired to test doubles."""
    return AppContext(
        settings=test_settings,
        provider=counting_provider,
        cache=quote_cache,
        holdings=sample_holdings,
        sleep=sleeper,
    )


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client backed by the test AppContext."""
    set_app_context(app_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 1e-6) -> None:
    """Assert two floats are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"

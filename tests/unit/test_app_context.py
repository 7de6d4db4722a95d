"""
Unit tests for AppContext wiring and settings.
"""

from portfolio_dashboard.app_context import AppContext, create_provider
from portfolio_dashboard.config.settings import Settings
from portfolio_dashboard.domain.models import QuoteSource
from portfolio_dashboard.providers import StubMarketDataProvider, YahooFinanceProvider
from portfolio_dashboard.repositories import InMemoryQuoteCache

from tests.conftest import CountingProvider, make_holding


class TestCreateProvider:
    def test_stub_selected(self):
        """
        GIVEN settings naming the stub provider
        WHEN create_provider is called
        THEN a StubMarketDataProvider is built
        """
        assert isinstance(create_provider(Settings(market_data_provider="stub")), StubMarketDataProvider)

    def test_yahoo_default(self):
        """
        GIVEN default settings
        WHEN create_provider is called
        THEN the Yahoo Finance provider is built
        """
        assert isinstance(create_provider(Settings()), YahooFinanceProvider)


class TestAppContext:
    """Tests for explicit construction and start-up."""

    def test_not_ready_until_started(self, sleeper):
        """
        GIVEN a context whose provider has not been started
        WHEN a quote is requested
        THEN the request is served from mock data rather than failing
        """
        provider = CountingProvider()
        context = AppContext(
            settings=Settings(market_data_provider="stub", mock_seed=1),
            provider=provider,
            holdings=[make_holding()],
            sleep=sleeper,
        )

        assert context.is_ready is False
        assert context.market_data.get_quote("ABC").source == QuoteSource.MOCK

        context.start()

        assert context.is_ready is True

    def test_start_loads_bundled_holdings(self):
        """
        GIVEN a context with no holdings injected
        WHEN start() runs
        THEN the bundled holdings file is loaded and the provider is ready
        """
        context = AppContext(settings=Settings(market_data_provider="stub"))

        context.start()

        assert len(context.holdings) > 0
        assert context.is_ready is True

    def test_services_share_one_cache(self, sleeper):
        """
        GIVEN a context wired with one counting provider
        WHEN the aggregator, get_quote and get_price all ask for ABC
        THEN the provider is called once
        """
        provider = CountingProvider()
        provider.start()
        context = AppContext(
            settings=Settings(market_data_provider="stub"),
            provider=provider,
            holdings=[make_holding("ABC")],
            sleep=sleeper,
        )

        context.aggregator.enrich(context.holdings)
        context.market_data.get_quote("ABC")
        context.market_data.get_price("ABC")

        assert provider.calls == ["ABC.NS"]

    def test_settings_ttls_applied(self, sleeper, fake_clock):
        """
        GIVEN settings with a 10s full-quote TTL
        WHEN the same symbol is resolved 10s apart
        THEN the provider is called again
        """
        provider = CountingProvider()
        provider.start()
        context = AppContext(
            settings=Settings(full_quote_ttl_seconds=10),
            provider=provider,
            cache=InMemoryQuoteCache(clock=fake_clock),
            holdings=[],
            sleep=sleeper,
        )

        context.engine.resolve_all(["ABC"])
        fake_clock.advance(10)
        context.engine.resolve_all(["ABC"])

        assert provider.calls == ["ABC.NS", "ABC.NS"]

    def test_env_prefix(self, monkeypatch):
        """
        GIVEN PORTFOLIO_-prefixed environment variables
        WHEN Settings is constructed
        THEN the values are read from the environment
        """
        monkeypatch.setenv("PORTFOLIO_BATCH_PACING_DELAY_SECONDS", "0.25")
        monkeypatch.setenv("PORTFOLIO_MARKET_DATA_PROVIDER", "stub")

        settings = Settings()

        assert settings.batch_pacing_delay_seconds == 0.25
        assert settings.market_data_provider == "stub"

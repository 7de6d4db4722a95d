"""
Quote provider adapter: symbol normalization, field mapping, and fallbacks.

Wraps a single MarketDataProvider. Every public method returns a usable value:
a live quote, the last cached live value (ignoring TTL), or a mock.
"""

import logging
import math
import random
import re
from dataclasses import replace
from typing import Any, Callable, Optional, TypeVar

from portfolio_dashboard.core.exceptions import ProviderUnavailableError
from portfolio_dashboard.core.timezone import now_ist
from portfolio_dashboard.domain.models import (
    CacheNamespace,
    PriceQuote,
    Quote,
    QuoteMetrics,
    QuoteSource,
)
from portfolio_dashboard.providers.market_data_provider import MarketDataProvider
from portfolio_dashboard.repositories.protocols import QuoteCache, make_cache_key

logger = logging.getLogger(__name__)

DEFAULT_MOCK_QUOTE_TTL_SECONDS = 30.0
DEFAULT_MOCK_PRICE_TTL_SECONDS = 5.0
DEFAULT_MOCK_METRICS_TTL_SECONDS = 60.0

MOCK_BASE_PRICE = 1000.0
MOCK_PRICE_SPREAD = 0.05  # Full width, i.e. +/- 2.5%

# Providers name the same value differently across asset classes;
# the first non-zero number wins.
PRICE_FIELDS = ("regularMarketPrice", "currentPrice")
PE_RATIO_FIELDS = ("trailingPE", "forwardPE")
EARNINGS_FIELDS = ("epsTrailingTwelveMonths", "trailingEps", "epsCurrentYear")
MARKET_CAP_FIELDS = ("marketCap",)

_NUMERIC_CODE = re.compile(r"^\d+$")

T = TypeVar("T", PriceQuote, Quote, QuoteMetrics)


def normalize_symbol(identifier: str) -> str:
    """
    Map a ticker or exchange code to the symbol Yahoo Finance expects.

    "RELIANCE.NS" -> unchanged, "500325" -> "500325.BO" (BSE code),
    "RELIANCE" -> "RELIANCE.NS" (NSE default).
    """
    symbol = str(identifier).strip()
    if "." in symbol:
        return symbol
    if _NUMERIC_CODE.match(symbol):
        return f"{symbol}.BO"
    return f"{symbol}.NS"


def first_number(info: dict[str, Any], fields: tuple[str, ...]) -> float:
    """Return the first finite, non-zero numeric value among fields, else 0."""
    for name in fields:
        value = info.get(name)
        if value is None or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(number) or number == 0:
            continue
        return number
    return 0.0


def round2(value: float) -> float:
    """Round to 2 decimal places for monetary values."""
    return round(float(value), 2)


class QuoteProviderAdapter:
    """
    Translates symbols into provider requests and provider payloads into quotes.

    On failure, falls back to the newest cached live value for the same
    namespace and symbol regardless of expiry, then to a mock that is cached
    briefly. Mocks are never served as stale data, so repeated failures keep
    producing fresh mocks once the short mock TTL has passed.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache: QuoteCache,
        rng: Optional[random.Random] = None,
        mock_quote_ttl_seconds: float = DEFAULT_MOCK_QUOTE_TTL_SECONDS,
        mock_price_ttl_seconds: float = DEFAULT_MOCK_PRICE_TTL_SECONDS,
        mock_metrics_ttl_seconds: float = DEFAULT_MOCK_METRICS_TTL_SECONDS,
    ):
        self._provider = provider
        self._cache = cache
        self._rng = rng or random.Random()
        self._mock_quote_ttl = mock_quote_ttl_seconds
        self._mock_price_ttl = mock_price_ttl_seconds
        self._mock_metrics_ttl = mock_metrics_ttl_seconds

    @property
    def is_ready(self) -> bool:
        return self._provider.is_ready

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch a full quote (price and metrics) for symbol."""
        return self._fetch_with_fallback(
            CacheNamespace.FULL,
            symbol,
            self._to_quote,
            self._mock_quote,
            self._mock_quote_ttl,
        )

    def fetch_price(self, symbol: str) -> PriceQuote:
        """Fetch only the current market price for symbol."""
        return self._fetch_with_fallback(
            CacheNamespace.PRICE,
            symbol,
            lambda s, info: self._to_quote(s, info).price_quote,
            self._mock_price,
            self._mock_price_ttl,
        )

    def fetch_metrics(self, symbol: str) -> QuoteMetrics:
        """Fetch only P/E, earnings and market cap for symbol."""
        return self._fetch_with_fallback(
            CacheNamespace.METRICS,
            symbol,
            lambda s, info: self._to_quote(s, info).metrics,
            self._mock_metrics,
            self._mock_metrics_ttl,
        )

    def _fetch_with_fallback(
        self,
        namespace: CacheNamespace,
        symbol: str,
        convert: Callable[[str, dict[str, Any]], T],
        make_mock: Callable[[str], T],
        mock_ttl: float,
    ) -> T:
        try:
            info = self._fetch_raw(symbol)
            return convert(symbol, info)
        except ProviderUnavailableError as exc:
            logger.warning("Error fetching %s data for %s: %s", namespace.value, symbol, exc.reason)

        key = make_cache_key(namespace, symbol)
        cached = self._cache.get(key, allow_expired=True)
        if cached is not None and cached.source != QuoteSource.MOCK:
            logger.info("Serving stale %s data for %s", namespace.value, symbol)
            return replace(cached, source=QuoteSource.STALE)

        mock = make_mock(symbol)
        self._cache.set(key, mock, mock_ttl)
        logger.info("Serving mock %s data for %s", namespace.value, symbol)
        return mock

    def _fetch_raw(self, symbol: str) -> dict[str, Any]:
        provider_symbol = normalize_symbol(symbol)
        logger.info("Fetching data for %s (%s)...", symbol, provider_symbol)
        try:
            info = self._provider.fetch_quote(provider_symbol)
        except ProviderUnavailableError:
            raise
        except Exception as exc:
            raise ProviderUnavailableError(provider_symbol, str(exc) or type(exc).__name__) from exc
        if not isinstance(info, dict):
            raise ProviderUnavailableError(provider_symbol, "malformed response")
        return info

    @staticmethod
    def _to_quote(symbol: str, info: dict[str, Any]) -> Quote:
        return Quote(
            symbol=symbol,
            price=first_number(info, PRICE_FIELDS),
            pe_ratio=first_number(info, PE_RATIO_FIELDS),
            latest_earnings=first_number(info, EARNINGS_FIELDS),
            market_cap=first_number(info, MARKET_CAP_FIELDS),
            source=QuoteSource.LIVE,
            as_of=now_ist(),
        )

    # Mock generation

    def _random_price(self) -> float:
        variation = (self._rng.random() - 0.5) * MOCK_PRICE_SPREAD
        return round2(MOCK_BASE_PRICE * (1 + variation))

    def _mock_price(self, symbol: str) -> PriceQuote:
        return PriceQuote(
            symbol=symbol,
            price=self._random_price(),
            source=QuoteSource.MOCK,
            as_of=now_ist(),
        )

    def _mock_metrics(self, symbol: str) -> QuoteMetrics:
        return QuoteMetrics(
            pe_ratio=round2(10 + self._rng.random() * 20),
            latest_earnings=round2(5 + self._rng.random() * 50),
            market_cap=round2(10000 + self._rng.random() * 50000),
            source=QuoteSource.MOCK,
        )

    def _mock_quote(self, symbol: str) -> Quote:
        price = self._random_price()
        metrics = self._mock_metrics(symbol)
        return Quote(
            symbol=symbol,
            price=price,
            pe_ratio=metrics.pe_ratio,
            latest_earnings=metrics.latest_earnings,
            market_cap=metrics.market_cap,
            source=QuoteSource.MOCK,
            as_of=now_ist(),
        )

"""Stub market data provider for offline/testing use."""

import random
from typing import Any

from portfolio_dashboard.core.exceptions import ProviderNotReadyError

# Deterministic fake fields for a few common NSE/BSE symbols:
# (price, trailing P/E, trailing EPS, market cap)
_STUB_QUOTES: dict[str, tuple[float, float, float, float]] = {
    "HDFCBANK.NS": (1650.25, 18.4, 89.7, 12540000000000.0),
    "BAJFINANCE.NS": (7120.50, 29.1, 244.6, 4410000000000.0),
    "AFFLE.NS": (1480.10, 56.3, 26.3, 207000000000.0),
    "KPITTECH.NS": (1395.75, 61.8, 22.6, 381000000000.0),
    "DMART.NS": (4025.00, 92.5, 43.5, 2620000000000.0),
    "ASTRAL.NS": (1710.40, 81.2, 21.1, 459000000000.0),
    "532174.BO": (1245.90, 17.6, 70.8, 8770000000000.0),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Returns Yahoo-style field names so it exercises the same normalization
    as the live provider. Unknown symbols get seeded random prices.
    """

    def __init__(self, seed: int = 42):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def start(self) -> None:
        self._ready = True

    def fetch_quote(self, provider_symbol: str) -> dict[str, Any]:
        """Return stub Yahoo-style fields for provider_symbol."""
        if not self._ready:
            raise ProviderNotReadyError(provider_symbol)

        upper_symbol = provider_symbol.upper()
        if upper_symbol in _STUB_QUOTES:
            price, pe_ratio, eps, market_cap = _STUB_QUOTES[upper_symbol]
        else:
            price = round(100 + self._rng.random() * 2900, 2)
            pe_ratio = round(8 + self._rng.random() * 40, 2)
            eps = round(price / pe_ratio, 2)
            market_cap = round(price * (1e7 + self._rng.random() * 1e9), 2)

        return {
            "symbol": upper_symbol,
            "regularMarketPrice": price,
            "trailingPE": pe_ratio,
            "epsTrailingTwelveMonths": eps,
            "marketCap": market_cap,
        }

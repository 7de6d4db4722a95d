"""Quote domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from portfolio_dashboard.domain.models.enums import QuoteSource


@dataclass(frozen=True)
class PriceQuote:
    """Current market price only."""

    symbol: str
    price: float
    source: QuoteSource = QuoteSource.LIVE
    as_of: Optional[datetime] = field(default=None, compare=False)


@dataclass(frozen=True)
class QuoteMetrics:
    """Fundamentals subset of a quote."""

    pe_ratio: float = 0.0
    latest_earnings: float = 0.0
    market_cap: float = 0.0
    source: QuoteSource = QuoteSource.LIVE


@dataclass(frozen=True)
class Quote:
    """
    Market quote for a symbol.

    Always fully populated: fields the provider did not report are 0.
    """

    symbol: str
    price: float
    pe_ratio: float = 0.0
    latest_earnings: float = 0.0
    market_cap: float = 0.0
    source: QuoteSource = QuoteSource.LIVE
    as_of: Optional[datetime] = field(default=None, compare=False)

    @property
    def price_quote(self) -> PriceQuote:
        """Return the price-only view of this quote."""
        return PriceQuote(
            symbol=self.symbol,
            price=self.price,
            source=self.source,
            as_of=self.as_of,
        )

    @property
    def metrics(self) -> QuoteMetrics:
        """Return the metrics-only view of this quote."""
        return QuoteMetrics(
            pe_ratio=self.pe_ratio,
            latest_earnings=self.latest_earnings,
            market_cap=self.market_cap,
            source=self.source,
        )

"""Pydantic schemas for quote endpoints."""

from portfolio_dashboard.api.schemas.base import CamelModel
from portfolio_dashboard.domain.models import Quote, QuoteSource


class QuoteResponse(CamelModel):
    """Current market price and metrics for one symbol."""

    symbol: str
    cmp: float
    pe_ratio: float
    latest_earnings: float
    market_cap: float
    source: QuoteSource

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            cmp=quote.price,
            pe_ratio=quote.pe_ratio,
            latest_earnings=quote.latest_earnings,
            market_cap=quote.market_cap,
            source=quote.source,
        )

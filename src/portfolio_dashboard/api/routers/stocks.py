"""Quote endpoints for single symbols and ad-hoc batches."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from portfolio_dashboard.api.deps import get_batch_engine, get_market_data_service
from portfolio_dashboard.api.schemas import ApiResponse, QuoteResponse
from portfolio_dashboard.core.exceptions import ValidationError
from portfolio_dashboard.services import BatchEnrichmentEngine, MarketDataService

router = APIRouter(prefix="/api", tags=["stocks"])


@router.get(
    "/stock/{symbol}",
    response_model=ApiResponse[QuoteResponse],
    response_model_exclude_none=True,
)
def get_stock(
    symbol: str,
    market: MarketDataService = Depends(get_market_data_service),
):
    """Get current price and P/E, earnings, market cap for one symbol."""
    quote = market.get_stock_data(symbol)
    return ApiResponse(data=QuoteResponse.from_quote(quote))


@router.post(
    "/stocks/batch",
    response_model=ApiResponse[dict[str, QuoteResponse]],
    response_model_exclude_none=True,
)
def post_stocks_batch(
    payload: Any = Body(None),
    engine: BatchEnrichmentEngine = Depends(get_batch_engine),
):
    """Resolve quotes for {"symbols": [...]} (sequential, cache-first)."""
    symbols = payload.get("symbols") if isinstance(payload, dict) else None
    if not isinstance(symbols, list):
        raise ValidationError("symbols array is required")

    quotes = engine.resolve_all(symbols)
    return ApiResponse(
        data={symbol: QuoteResponse.from_quote(q) for symbol, q in quotes.items()}
    )

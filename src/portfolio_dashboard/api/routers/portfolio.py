"""Portfolio endpoints: static holdings and the live-enriched snapshot."""

from fastapi import APIRouter, Depends

from portfolio_dashboard.api.deps import get_holdings, get_portfolio_aggregator
from portfolio_dashboard.api.schemas import (
    ApiResponse,
    PortfolioSnapshotResponse,
    StockResponse,
)
from portfolio_dashboard.domain.models import Holding
from portfolio_dashboard.services import PortfolioAggregator

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get(
    "",
    response_model=ApiResponse[list[StockResponse]],
    response_model_exclude_none=True,
)
def get_portfolio(
    holdings: list[Holding] = Depends(get_holdings),
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
):
    """Return holdings with sectors assigned and their last-known market fields."""
    stocks = aggregator.classify(holdings)
    return ApiResponse(data=[StockResponse.from_holding(s) for s in stocks])


@router.get(
    "/live",
    response_model=ApiResponse[PortfolioSnapshotResponse],
    response_model_exclude_none=True,
)
def get_live_portfolio(
    holdings: list[Holding] = Depends(get_holdings),
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
):
    """
    Return holdings enriched with live quotes, sector summaries and totals.

    Quotes are resolved sequentially with pacing, so a cold cache makes this
    slow; the frontend's polling interval keeps it warm.
    """
    snapshot = aggregator.enrich(holdings)
    return ApiResponse(data=PortfolioSnapshotResponse.from_snapshot(snapshot))

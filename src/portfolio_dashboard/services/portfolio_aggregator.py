"""Portfolio aggregator for merging holdings with live quotes."""

from dataclasses import replace
from typing import Callable, Optional

from portfolio_dashboard.core.exceptions import ValidationError
from portfolio_dashboard.core.timezone import now_ist
from portfolio_dashboard.domain.models import Holding, Quote
from portfolio_dashboard.domain.views import PortfolioSnapshot, SectorSummary
from portfolio_dashboard.services.batch_enrichment import BatchEnrichmentEngine
from portfolio_dashboard.services.sector_classifier import classify_sector


def gain_loss_percent(gain_loss: float, investment: float) -> float:
    """Return gain/loss as a percentage of investment, 0 when nothing invested."""
    if investment > 0:
        return gain_loss / investment * 100
    return 0.0


class PortfolioAggregator:
    """
    Builds portfolio snapshots from static holdings and quotes.

    Every snapshot is computed from scratch: per-holding values, sector
    rollups and totals are never updated incrementally.
    """

    def __init__(
        self,
        engine: BatchEnrichmentEngine,
        classifier: Callable[[str], str] = classify_sector,
    ):
        self._engine = engine
        self._classify = classifier

    def classify(self, holdings: list[Holding]) -> list[Holding]:
        """Return copies of holdings with sectors assigned by name."""
        _validate_holdings(holdings)
        return [replace(h, sector=self._classify(h.name)) for h in holdings]

    def enrich(
        self,
        holdings: list[Holding],
        quotes: Optional[dict[str, Quote]] = None,
    ) -> PortfolioSnapshot:
        """
        Merge quotes into holdings and roll up sectors and totals.

        Resolves quotes through the batch engine when none are given.
        Holdings without a quote keep their static market fields.
        """
        classified = self.classify(holdings)
        if quotes is None:
            quotes = self._engine.resolve_all([h.symbol for h in classified])

        stocks = [enrich_holding(h, quotes.get(h.symbol)) for h in classified]

        return PortfolioSnapshot(
            stocks=stocks,
            sector_summaries=summarize_sectors(stocks),
            total_investment=sum(s.investment for s in stocks),
            total_present_value=sum(s.present_value for s in stocks),
            total_gain_loss=sum(s.gain_loss for s in stocks),
            generated_at=now_ist(),
        )


def enrich_holding(holding: Holding, quote: Optional[Quote]) -> Holding:
    """
    Recompute a holding's derived financials from a quote.

    Each live field falls back to the holding's static value when the quote
    is missing or reports 0 for it.
    """
    if quote is None:
        cmp = holding.cmp
        pe_ratio = holding.pe_ratio
        latest_earnings = holding.latest_earnings
        market_cap = holding.market_cap
    else:
        cmp = quote.price or holding.cmp
        pe_ratio = quote.pe_ratio or holding.pe_ratio
        latest_earnings = quote.latest_earnings or holding.latest_earnings
        market_cap = quote.market_cap or holding.market_cap

    present_value = cmp * holding.quantity
    gain_loss = present_value - holding.investment

    return replace(
        holding,
        cmp=cmp,
        present_value=present_value,
        gain_loss=gain_loss,
        gain_loss_percent=gain_loss_percent(gain_loss, holding.investment),
        pe_ratio=pe_ratio,
        latest_earnings=latest_earnings,
        market_cap=market_cap,
    )


def summarize_sectors(stocks: list[Holding]) -> list[SectorSummary]:
    """Group holdings by sector, in order of first appearance."""
    sectors: dict[str, SectorSummary] = {}

    for stock in stocks:
        summary = sectors.get(stock.sector)
        if summary is None:
            summary = sectors[stock.sector] = SectorSummary(sector=stock.sector)
        summary.stock_count += 1
        summary.total_investment += stock.investment
        summary.total_present_value += stock.present_value
        summary.total_gain_loss += stock.gain_loss

    for summary in sectors.values():
        summary.gain_loss_percent = gain_loss_percent(
            summary.total_gain_loss, summary.total_investment
        )

    return list(sectors.values())


def _validate_holdings(holdings: list[Holding]) -> None:
    if not isinstance(holdings, list):
        raise ValidationError("holdings must be a list")
    for holding in holdings:
        if not isinstance(holding, Holding):
            raise ValidationError(f"Invalid holding: {holding!r}")

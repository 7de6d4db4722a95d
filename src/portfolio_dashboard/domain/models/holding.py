"""Holding domain model."""

from dataclasses import dataclass

from portfolio_dashboard.core.exceptions import ValidationError

DEFAULT_SECTOR = "Others"


@dataclass
class Holding:
    """
    Static portfolio position, loaded once at startup.

    investment is assumed to equal purchase_price * quantity in the source
    data; it is never re-derived. The market fields (cmp through
    latest_earnings) are the last-known values from the source file and act
    as fallbacks when no live quote is available.
    """

    id: int
    name: str
    symbol: str
    purchase_price: float = 0.0
    quantity: float = 0.0
    investment: float = 0.0
    portfolio_percent: float = 0.0
    sector: str = DEFAULT_SECTOR
    cmp: float = 0.0
    present_value: float = 0.0
    gain_loss: float = 0.0
    gain_loss_percent: float = 0.0
    market_cap: float = 0.0
    pe_ratio: float = 0.0
    latest_earnings: float = 0.0

    def __post_init__(self) -> None:
        # Exchange codes arrive as numbers from spreadsheet exports
        if isinstance(self.symbol, (int, float)) and not isinstance(self.symbol, bool):
            self.symbol = str(int(self.symbol))
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(f"Holding {self.id} has no name")
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise ValidationError(f"Holding {self.id} ({self.name}) has no symbol")
        if self.quantity < 0:
            raise ValidationError(f"Holding {self.id} ({self.name}) has negative quantity")
        self.symbol = self.symbol.strip()

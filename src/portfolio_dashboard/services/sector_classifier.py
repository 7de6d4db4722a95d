"""Keyword-based sector classification of holdings."""

from portfolio_dashboard.domain.models import DEFAULT_SECTOR

# Checked in order; the first sector with a keyword contained in the name wins.
SECTOR_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Financial", ("Bank", "Finance", "Housing", "Financials")),
    ("Technology", ("Tech", "Mindtree", "Affle", "KPIT", "Tata Tech", "BLS", "Tanla")),
    ("Consumer", ("Dmart", "Consumer", "Pidilite")),
    ("Power", ("Power", "Green", "Suzlon", "Gensol")),
    ("Pipe", ("Pipes", "Astral", "Polycab")),
)


def classify_sector(name: str) -> str:
    """Return the sector label for a holding name (case-sensitive match)."""
    for sector, keywords in SECTOR_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return sector
    return DEFAULT_SECTOR

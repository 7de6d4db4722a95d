"""Market data provider protocol."""

from typing import Any, Protocol


class MarketDataProvider(Protocol):
    """
    Protocol for upstream market data sources.

    Implementations are constructed at application startup and become usable
    once start() has run. fetch_quote() takes an exchange-qualified symbol
    (e.g. RELIANCE.NS) and returns the provider's raw field dict. Any failure,
    including a call before start(), raises ProviderUnavailableError.
    """

    @property
    def is_ready(self) -> bool:
        """True once start() has completed successfully."""
        ...

    def start(self) -> None:
        """Initialize the underlying client."""
        ...

    def fetch_quote(self, provider_symbol: str) -> dict[str, Any]:
        """Fetch raw quote fields for one exchange-qualified symbol."""
        ...

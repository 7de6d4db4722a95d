"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ProviderUnavailableError(AppError):
    """
    Raised by market data providers when an upstream call fails.

    Covers network errors, timeouts and malformed payloads. The quote adapter
    recovers from it locally; it never reaches the API layer.
    """

    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        self.reason = reason
        super().__init__(
            f"Market data unavailable for {symbol}: {reason}",
            code="PROVIDER_UNAVAILABLE",
        )


class ProviderNotReadyError(ProviderUnavailableError):
    """Raised when a provider is called before start() completed."""

    def __init__(self, symbol: str):
        super().__init__(symbol, "provider not started")

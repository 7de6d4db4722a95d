"""Yahoo Finance provider backed by yfinance."""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Any, Optional

from portfolio_dashboard.core.exceptions import ProviderNotReadyError, ProviderUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YahooFinanceProvider:
    """
    Fetches quotes from Yahoo Finance via yfinance.

    The yfinance module is loaded in start(), called once during application
    startup. Calls made before that fail fast with ProviderNotReadyError.
    Each fetch is bounded by fetch_timeout_seconds.
    """

    def __init__(self, fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS):
        self._fetch_timeout = fetch_timeout_seconds
        self._yf: Optional[Any] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def is_ready(self) -> bool:
        return self._yf is not None

    def start(self) -> None:
        """Load yfinance. On import failure the provider stays not ready."""
        if self._yf is not None:
            return
        try:
            self._yf = _get_yf()
        except ImportError as exc:
            logger.warning("Yahoo Finance module not available, using mock data: %s", exc)
            return
        # One worker: a hung request delays later fetches instead of leaking threads
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="yahoo-fetch")

    def fetch_quote(self, provider_symbol: str) -> dict[str, Any]:
        """Return the yfinance info dict for provider_symbol."""
        if self._yf is None or self._executor is None:
            raise ProviderNotReadyError(provider_symbol)

        future = self._executor.submit(self._fetch_info, provider_symbol)
        try:
            info = future.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError:
            future.cancel()
            raise ProviderUnavailableError(
                provider_symbol, f"timed out after {self._fetch_timeout}s"
            )
        except Exception as exc:
            raise ProviderUnavailableError(provider_symbol, str(exc) or type(exc).__name__) from exc

        if not isinstance(info, dict):
            raise ProviderUnavailableError(provider_symbol, "malformed response")
        return info

    def _fetch_info(self, provider_symbol: str) -> Any:
        ticker = self._yf.Ticker(provider_symbol)
        return ticker.info

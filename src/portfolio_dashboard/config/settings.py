"""Application settings and configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_holdings_file() -> Path:
    """Return the holdings file bundled with the package."""
    return Path(__file__).resolve().parent.parent / "data" / "holdings.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Portfolio Dashboard"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    port: int = 5000

    # Static holdings source (bundled sample if not set)
    holdings_file: Optional[Path] = None

    # Market data settings
    market_data_provider: Literal["yahoo", "stub"] = "yahoo"
    provider_timeout_seconds: float = 10.0
    batch_pacing_delay_seconds: float = 0.5

    # Cache TTLs for live data
    full_quote_ttl_seconds: float = 120.0
    price_ttl_seconds: float = 15.0
    metrics_ttl_seconds: float = 60.0

    # Cache TTLs for mock fallbacks (short, so recovery is quick)
    mock_quote_ttl_seconds: float = 30.0
    mock_price_ttl_seconds: float = 5.0
    mock_metrics_ttl_seconds: float = 60.0

    # Seed for mock quote generation (None = non-deterministic)
    mock_seed: Optional[int] = None

    cors_origins: list[str] = ["*"]

    def get_holdings_file(self) -> Path:
        """Get the holdings file, defaulting to the bundled sample."""
        return self.holdings_file or get_default_holdings_file()


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and entrypoint)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

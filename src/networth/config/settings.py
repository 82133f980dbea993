"""Application settings and configuration."""

from datetime import date
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from networth.domain.models.enums import MissingRatePolicy


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".networth"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Net Worth Tracker"
    app_version: str = "0.1.0"

    # Data directory (database and rate cache live here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"
    log_to_file: bool = False

    # Calendar day used for "today" and freshness checks
    timezone: str = "Europe/Zurich"

    # Portfolio defaults (authentication is handled upstream)
    default_owner: str = "default"
    base_currency: str = "CHF"

    # FX quote source
    fx_provider: Literal["yahoo", "csv", "stub"] = "yahoo"
    fx_api_key: Optional[str] = None
    fx_csv_url: str = "https://query1.finance.yahoo.com/v7/finance/download/{ticker}"
    fx_fetch_timeout_seconds: float = 10.0
    fx_history_start: date = date(2016, 1, 1)

    # Rate lookup
    fx_lookback_days: int = 2
    missing_rate_policy: MissingRatePolicy = MissingRatePolicy.LAST_KNOWN

    # Response shaping
    history_window_days: int = 1095
    trend_window: int = 300
    trend_horizon: int = 365

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "portfolio.db"
        return f"sqlite:///{db_path}"

    def get_rate_cache_dir(self) -> Path:
        """Get the directory holding one rate artifact per currency pair."""
        fx_dir = self.get_data_dir() / "fx"
        fx_dir.mkdir(parents=True, exist_ok=True)
        return fx_dir

    def get_log_dir(self) -> Path:
        """Get the log directory."""
        log_dir = self.get_data_dir() / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and scripts)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None

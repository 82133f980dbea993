"""Core utilities and shared functionality."""

from networth.core.timezone import (
    local_tz,
    now_local,
    today_local,
    parse_date,
    date_to_timestamp,
)
from networth.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConfigError,
    FetchError,
    RateUnavailableError,
    RegressionError,
    PersistenceError,
)

__all__ = [
    "local_tz",
    "now_local",
    "today_local",
    "parse_date",
    "date_to_timestamp",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConfigError",
    "FetchError",
    "RateUnavailableError",
    "RegressionError",
    "PersistenceError",
]

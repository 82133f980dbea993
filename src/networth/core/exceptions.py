"""Application-level exceptions."""

from datetime import date
from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code: int = 400

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: Optional[int] = None):
        self.message = message
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class ConfigError(AppError):
    """Raised when required configuration (e.g. quote source credentials) is missing."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="CONFIG_ERROR")


class FetchError(AppError):
    """Raised when the remote quote source is unreachable or returns unusable data."""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="FETCH_ERROR")


class RateUnavailableError(AppError):
    """Raised when no conversion rate can be found for a date that needs one."""

    status_code = 422

    def __init__(self, from_code: str, to_code: str, on_date: date):
        self.from_code = from_code
        self.to_code = to_code
        self.on_date = on_date
        super().__init__(
            f"No {from_code}->{to_code} rate available on or before {on_date.isoformat()}",
            code="RATE_UNAVAILABLE",
        )


class RegressionError(AppError):
    """Raised when a trend cannot be fitted to the given series."""

    status_code = 422

    def __init__(self, message: str):
        super().__init__(message, code="REGRESSION_ERROR")


class PersistenceError(AppError):
    """Raised when cached rate artifacts cannot be read or written."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="PERSISTENCE_ERROR")

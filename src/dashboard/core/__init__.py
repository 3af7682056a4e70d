"""Core utilities and shared functionality."""

from dashboard.core.clock import Clock, SystemClock
from dashboard.core.timezone import (
    now_utc,
    to_iso_utc,
    UTC,
)
from dashboard.core.exceptions import (
    AppError,
    QuoteSourceError,
    PortfolioUnavailableError,
)

__all__ = [
    "Clock",
    "SystemClock",
    "now_utc",
    "to_iso_utc",
    "UTC",
    "AppError",
    "QuoteSourceError",
    "PortfolioUnavailableError",
]

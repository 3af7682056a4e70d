"""Domain layer - pure business models with no external dependencies."""

from dashboard.domain.models import (
    Holding,
    DataSource,
    CacheStatus,
    QuoteResult,
    ResolvedQuote,
)

__all__ = [
    "Holding",
    "DataSource",
    "CacheStatus",
    "QuoteResult",
    "ResolvedQuote",
]

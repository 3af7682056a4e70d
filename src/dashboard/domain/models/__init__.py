"""Domain models package."""

from dashboard.domain.models.enums import DataSource, CacheStatus
from dashboard.domain.models.holding import Holding, DEFAULT_FALLBACK_MARKUP
from dashboard.domain.models.quote import (
    PrimaryQuote,
    SecondaryQuote,
    FallbackQuote,
    UnavailableQuote,
    QuoteResult,
    ResolvedQuote,
    CacheEntry,
)

__all__ = [
    "DataSource",
    "CacheStatus",
    "Holding",
    "DEFAULT_FALLBACK_MARKUP",
    "PrimaryQuote",
    "SecondaryQuote",
    "FallbackQuote",
    "UnavailableQuote",
    "QuoteResult",
    "ResolvedQuote",
    "CacheEntry",
]

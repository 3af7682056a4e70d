"""
Quote results, one type per provenance.

Each variant carries only the fields its source can supply: the secondary
source never reports earnings, and static fallbacks carry a price alone.
All variants expose the same read-only accessors so callers never branch
on type to build a response.
"""

from dataclasses import dataclass
from typing import Optional, Union

from dashboard.domain.models.enums import DataSource


@dataclass(frozen=True)
class PrimaryQuote:
    """Quote from the primary source (Yahoo Finance)."""

    price: float
    pe_ratio: Optional[float] = None
    latest_earnings: Optional[float] = None

    @property
    def source(self) -> DataSource:
        return DataSource.PRIMARY


@dataclass(frozen=True)
class SecondaryQuote:
    """Quote from the secondary source (Alpha Vantage)."""

    price: float
    pe_ratio: Optional[float] = None

    @property
    def source(self) -> DataSource:
        return DataSource.SECONDARY

    @property
    def latest_earnings(self) -> None:
        return None


@dataclass(frozen=True)
class _StaticQuote:
    price: float

    @property
    def pe_ratio(self) -> None:
        return None

    @property
    def latest_earnings(self) -> None:
        return None


@dataclass(frozen=True)
class FallbackQuote(_StaticQuote):
    """Last-known price used after both remote sources failed."""

    @property
    def source(self) -> DataSource:
        return DataSource.FALLBACK


@dataclass(frozen=True)
class UnavailableQuote(_StaticQuote):
    """Last-known price for a symbol the remote sources do not carry."""

    @property
    def source(self) -> DataSource:
        return DataSource.UNAVAILABLE


QuoteResult = Union[PrimaryQuote, SecondaryQuote, FallbackQuote, UnavailableQuote]


@dataclass(frozen=True)
class ResolvedQuote:
    """A quote plus whether it was served from the cache."""

    quote: QuoteResult
    from_cache: bool = False


@dataclass(frozen=True)
class CacheEntry:
    """Cached quote and the clock reading when it was stored."""

    quote: QuoteResult
    stored_at: float

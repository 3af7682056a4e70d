"""Quote cache repository protocol."""

from typing import Protocol, Optional

from dashboard.domain.models import CacheEntry, QuoteResult


class QuoteCacheRepository(Protocol):
    """Interface for the process-wide quote cache."""

    def get_fresh(self, key: str, max_age_seconds: float) -> Optional[CacheEntry]:
        """Get the cache entry for a key if it is younger than max_age_seconds."""
        ...

    def put(self, key: str, quote: QuoteResult) -> CacheEntry:
        """Store a quote under key, stamped with the current clock reading."""
        ...

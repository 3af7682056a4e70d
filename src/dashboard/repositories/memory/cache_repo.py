"""In-memory quote cache."""

from typing import Optional

from dashboard.core.clock import Clock, SystemClock
from dashboard.domain.models import CacheEntry, QuoteResult


class InMemoryQuoteCacheRepository:
    """
    Dict-backed quote cache with an injectable clock.

    Entries are never evicted; staleness is checked on read. Concurrent
    resolutions may write the same key back to back with equivalent quotes.
    That race is accepted as last-write-wins: under asyncio every read and
    write here runs between suspension points, and a threaded caller would
    need a per-key lock around put().
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or SystemClock()
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[CacheEntry]:
        """Entry for key regardless of age; for inspection."""
        return self._entries.get(key)

    def get_fresh(self, key: str, max_age_seconds: float) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock.now() - entry.stored_at < max_age_seconds:
            return entry
        return None

    def put(self, key: str, quote: QuoteResult) -> CacheEntry:
        entry = CacheEntry(quote=quote, stored_at=self._clock.now())
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

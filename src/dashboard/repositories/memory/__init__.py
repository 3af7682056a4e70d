"""In-memory repository implementations."""

from dashboard.repositories.memory.cache_repo import InMemoryQuoteCacheRepository

__all__ = [
    "InMemoryQuoteCacheRepository",
]

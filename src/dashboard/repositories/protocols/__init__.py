"""Repository protocol definitions (interfaces)."""

from dashboard.repositories.protocols.cache_repo import QuoteCacheRepository

__all__ = [
    "QuoteCacheRepository",
]

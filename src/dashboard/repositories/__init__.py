"""Repository layer - data access abstractions and implementations."""

from dashboard.repositories.protocols import QuoteCacheRepository
from dashboard.repositories.memory import InMemoryQuoteCacheRepository

__all__ = [
    "QuoteCacheRepository",
    "InMemoryQuoteCacheRepository",
]

"""Service layer - business logic orchestration."""

from dashboard.services.quote_resolver import QuoteResolver
from dashboard.services.portfolio_aggregator import PortfolioAggregator

__all__ = [
    "QuoteResolver",
    "PortfolioAggregator",
]

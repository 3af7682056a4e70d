"""Dependency injection for FastAPI."""

from fastapi import Depends

from dashboard.app_context import AppContext, get_app_context
from dashboard.services import PortfolioAggregator


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_portfolio_aggregator(
    context: AppContext = Depends(get_context),
) -> PortfolioAggregator:
    """Provide PortfolioAggregator instance."""
    return context.aggregator

"""View models for service outputs."""

from dashboard.domain.views.portfolio import (
    EnrichedHolding,
    PortfolioSummary,
    SectorSummary,
    PortfolioSnapshot,
)

__all__ = [
    "EnrichedHolding",
    "PortfolioSummary",
    "SectorSummary",
    "PortfolioSnapshot",
]

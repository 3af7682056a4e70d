"""View models for portfolio outputs."""

from dataclasses import dataclass, field
from typing import Optional

from dashboard.domain.models import CacheStatus, DataSource, Holding


@dataclass
class EnrichedHolding:
    """A holding valued at its resolved quote."""

    holding: Holding
    cmp: float
    investment: float
    present_value: float
    gain_loss: float
    gain_loss_percent: float
    pe_ratio: Optional[float]
    latest_earnings: Optional[float]
    data_source: DataSource
    from_cache: bool
    last_updated: str
    portfolio_percent: float = 0.0


@dataclass
class PortfolioSummary:
    """Totals across a set of holdings."""

    total_investment: float = 0.0
    total_present_value: float = 0.0
    total_gain_loss: float = 0.0
    gain_loss_percent: float = 0.0


@dataclass
class SectorSummary(PortfolioSummary):
    """Totals for one sector label."""

    sector: str = ""


@dataclass
class PortfolioSnapshot:
    """Everything the dashboard renders for one refresh."""

    stocks: list[EnrichedHolding] = field(default_factory=list)
    sectors: list[SectorSummary] = field(default_factory=list)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)
    timestamp: str = ""
    cache_status: CacheStatus = CacheStatus.FRESH

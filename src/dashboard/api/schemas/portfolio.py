"""Pydantic schemas for the portfolio API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dashboard.domain.models import CacheStatus, DataSource
from dashboard.domain.views import (
    EnrichedHolding,
    PortfolioSnapshot,
    PortfolioSummary,
    SectorSummary,
)


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StockResponse(CamelModel):
    """A holding with its quote and derived valuation fields."""

    id: int
    particulars: str
    purchase_price: float
    quantity: float
    nse_bse: str
    sector: str
    sold_price: Optional[float] = None
    fallback_cmp: Optional[float] = Field(default=None, alias="fallbackCMP")
    cmp: float
    investment: float
    present_value: float
    gain_loss: float
    gain_loss_percent: float
    portfolio_percent: float
    pe_ratio: Optional[float] = None
    latest_earnings: Optional[float] = None
    data_source: DataSource
    from_cache: bool
    last_updated: str

    @classmethod
    def from_view(cls, stock: EnrichedHolding) -> "StockResponse":
        h = stock.holding
        return cls(
            id=h.id,
            particulars=h.particulars,
            purchase_price=h.purchase_price,
            quantity=h.quantity,
            nse_bse=h.symbol,
            sector=h.sector,
            sold_price=h.sold_price,
            fallback_cmp=h.fallback_price,
            cmp=stock.cmp,
            investment=stock.investment,
            present_value=stock.present_value,
            gain_loss=stock.gain_loss,
            gain_loss_percent=stock.gain_loss_percent,
            portfolio_percent=stock.portfolio_percent,
            pe_ratio=stock.pe_ratio,
            latest_earnings=stock.latest_earnings,
            data_source=stock.data_source,
            from_cache=stock.from_cache,
            last_updated=stock.last_updated,
        )


class SummaryResponse(CamelModel):
    """Portfolio-wide totals."""

    total_investment: float
    total_present_value: float
    total_gain_loss: float
    gain_loss_percent: float

    @classmethod
    def from_view(cls, summary: PortfolioSummary) -> "SummaryResponse":
        return cls(
            total_investment=summary.total_investment,
            total_present_value=summary.total_present_value,
            total_gain_loss=summary.total_gain_loss,
            gain_loss_percent=summary.gain_loss_percent,
        )


class SectorSummaryResponse(SummaryResponse):
    """Totals for one sector."""

    sector: str

    @classmethod
    def from_view(cls, summary: SectorSummary) -> "SectorSummaryResponse":
        return cls(
            sector=summary.sector,
            total_investment=summary.total_investment,
            total_present_value=summary.total_present_value,
            total_gain_loss=summary.total_gain_loss,
            gain_loss_percent=summary.gain_loss_percent,
        )


class PortfolioResponse(CamelModel):
    """Response for GET /api/portfolio."""

    stocks: list[StockResponse]
    sectors: list[SectorSummaryResponse]
    summary: SummaryResponse
    timestamp: str
    cache_status: CacheStatus

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "PortfolioResponse":
        return cls(
            stocks=[StockResponse.from_view(s) for s in snapshot.stocks],
            sectors=[SectorSummaryResponse.from_view(s) for s in snapshot.sectors],
            summary=SummaryResponse.from_view(snapshot.summary),
            timestamp=snapshot.timestamp,
            cache_status=snapshot.cache_status,
        )


class ErrorResponse(BaseModel):
    """Error body returned when the portfolio cannot be assembled."""

    error: str

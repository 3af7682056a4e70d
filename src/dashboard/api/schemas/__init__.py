"""Pydantic schemas for API request/response validation."""

from dashboard.api.schemas.portfolio import (
    StockResponse,
    SummaryResponse,
    SectorSummaryResponse,
    PortfolioResponse,
    ErrorResponse,
)

__all__ = [
    "StockResponse",
    "SummaryResponse",
    "SectorSummaryResponse",
    "PortfolioResponse",
    "ErrorResponse",
]

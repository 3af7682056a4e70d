"""Portfolio API: GET /api/portfolio with live quotes and sector totals."""

from fastapi import APIRouter, Depends, Response

from dashboard.api.deps import get_portfolio_aggregator
from dashboard.api.schemas import ErrorResponse, PortfolioResponse
from dashboard.services import PortfolioAggregator

router = APIRouter(prefix="/api", tags=["portfolio"])

# Intermediaries and browsers must never serve a stale portfolio
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, max-age=0",
    "Pragma": "no-cache",
    "Expires": "-1",
}


@router.get(
    "/portfolio",
    response_model=PortfolioResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_portfolio(
    response: Response,
    aggregator: PortfolioAggregator = Depends(get_portfolio_aggregator),
) -> PortfolioResponse:
    """
    Return every holding valued at its current quote, plus sector and
    portfolio totals. Failures surface as 500 with {"error": ...} via the
    application error handler.
    """
    response.headers.update(NO_CACHE_HEADERS)
    snapshot = await aggregator.build_snapshot()
    return PortfolioResponse.from_snapshot(snapshot)

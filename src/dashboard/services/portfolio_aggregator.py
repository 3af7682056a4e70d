"""Portfolio aggregator: values every holding and rolls totals up by sector."""

import asyncio
import logging
from collections.abc import Sequence

from dashboard.core.exceptions import PortfolioUnavailableError
from dashboard.core.timezone import now_utc, to_iso_utc
from dashboard.domain.models import CacheStatus, Holding, ResolvedQuote
from dashboard.domain.views import (
    EnrichedHolding,
    PortfolioSnapshot,
    PortfolioSummary,
    SectorSummary,
)
from dashboard.services.quote_resolver import QuoteResolver

logger = logging.getLogger(__name__)


def percent_of(part: float, whole: float) -> float:
    """part / whole * 100, or 0 when whole is not positive."""
    return (part / whole) * 100 if whole > 0 else 0.0


def enrich_holding(holding: Holding, resolved: ResolvedQuote, last_updated: str) -> EnrichedHolding:
    """Value one holding at its resolved quote."""
    quote = resolved.quote
    investment = holding.purchase_price * holding.quantity
    present_value = quote.price * holding.quantity
    gain_loss = present_value - investment
    return EnrichedHolding(
        holding=holding,
        cmp=quote.price,
        investment=investment,
        present_value=present_value,
        gain_loss=gain_loss,
        gain_loss_percent=(gain_loss / investment) * 100,
        pe_ratio=quote.pe_ratio,
        latest_earnings=quote.latest_earnings,
        data_source=quote.source,
        from_cache=resolved.from_cache,
        last_updated=last_updated,
    )


def summarize(stocks: Sequence[EnrichedHolding]) -> PortfolioSummary:
    """Sum investment and present value across stocks."""
    total_investment = sum(s.investment for s in stocks)
    total_present_value = sum(s.present_value for s in stocks)
    total_gain_loss = total_present_value - total_investment
    return PortfolioSummary(
        total_investment=total_investment,
        total_present_value=total_present_value,
        total_gain_loss=total_gain_loss,
        gain_loss_percent=percent_of(total_gain_loss, total_investment),
    )


def summarize_sectors(stocks: Sequence[EnrichedHolding]) -> list[SectorSummary]:
    """One summary per sector label, in the order sectors first appear."""
    by_sector: dict[str, list[EnrichedHolding]] = {}
    for stock in stocks:
        by_sector.setdefault(stock.holding.sector, []).append(stock)

    sectors = []
    for sector, members in by_sector.items():
        totals = summarize(members)
        sectors.append(
            SectorSummary(
                sector=sector,
                total_investment=totals.total_investment,
                total_present_value=totals.total_present_value,
                total_gain_loss=totals.total_gain_loss,
                gain_loss_percent=totals.gain_loss_percent,
            )
        )
    return sectors


class PortfolioAggregator:
    """
    Builds a full portfolio snapshot from a fixed holding list.

    All holdings are resolved concurrently and the snapshot is all or
    nothing: any failure while assembling it raises PortfolioUnavailableError.
    """

    def __init__(self, holdings: Sequence[Holding], resolver: QuoteResolver):
        self._holdings = tuple(holdings)
        self._resolver = resolver

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return self._holdings

    async def build_snapshot(self) -> PortfolioSnapshot:
        """Resolve quotes for every holding and compute sector and portfolio totals."""
        try:
            return await self._build_snapshot()
        except Exception as exc:
            logger.exception("Error processing portfolio data")
            raise PortfolioUnavailableError() from exc

    async def _build_snapshot(self) -> PortfolioSnapshot:
        resolved = await asyncio.gather(
            *(
                self._resolver.resolve(h.symbol, h.effective_fallback_price)
                for h in self._holdings
            )
        )

        stocks = []
        # gather() preserves argument order, so zip pairs each holding with its own quote
        for holding, quote in zip(self._holdings, resolved):
            stocks.append(enrich_holding(holding, quote, to_iso_utc(now_utc())))

        summary = summarize(stocks)
        for stock in stocks:
            stock.portfolio_percent = percent_of(stock.investment, summary.total_investment)

        cache_status = (
            CacheStatus.CACHED if any(s.from_cache for s in stocks) else CacheStatus.FRESH
        )
        return PortfolioSnapshot(
            stocks=stocks,
            sectors=summarize_sectors(stocks),
            summary=summary,
            timestamp=to_iso_utc(now_utc()),
            cache_status=cache_status,
        )

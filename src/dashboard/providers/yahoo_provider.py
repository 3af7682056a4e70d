"""Primary quote source: Yahoo Finance via yfinance."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from dashboard.core.exceptions import QuoteSourceError
from dashboard.domain.models import PrimaryQuote
from dashboard.providers.market_data_provider import parse_optional_metric, parse_price

logger = logging.getLogger(__name__)


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _extract_quote(symbol: str, info: Any) -> PrimaryQuote:
    """Build a PrimaryQuote from a yfinance info dict; raise QuoteSourceError if unusable."""
    if not isinstance(info, dict) or not info:
        raise QuoteSourceError(YahooFinanceProvider.name, symbol, "empty quote payload")
    price = parse_price(info.get("regularMarketPrice"))
    if price is None:
        raise QuoteSourceError(YahooFinanceProvider.name, symbol, "missing regularMarketPrice")
    return PrimaryQuote(
        price=price,
        pe_ratio=parse_optional_metric(info.get("trailingPE")),
        latest_earnings=parse_optional_metric(info.get("epsTrailingTwelveMonths")),
    )


class YahooFinanceProvider:
    """
    Fetches quotes from Yahoo Finance.

    yfinance is blocking, so each lookup runs on the provider's own thread
    pool. Size the pool to the portfolio fan-out: a lookup still waiting for
    a free worker counts against the caller's timeout. A lookup that
    outlives that timeout is abandoned, not cancelled.
    """

    name = "yahoo"

    def __init__(self, max_workers: Optional[int] = None):
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="yahoo-quote"
        )

    def _fetch_info(self, symbol: str) -> Any:
        yf = _get_yf()
        return yf.Ticker(symbol).info

    async def fetch_quote(self, symbol: str) -> PrimaryQuote:
        loop = asyncio.get_running_loop()
        try:
            info = await loop.run_in_executor(self._executor, self._fetch_info, symbol)
        except Exception as exc:
            raise QuoteSourceError(self.name, symbol, str(exc) or type(exc).__name__) from exc
        quote = _extract_quote(symbol, info)
        logger.debug("Yahoo quote for %s: %s", symbol, quote.price)
        return quote

    async def aclose(self) -> None:
        """Stop accepting lookups; abandoned workers finish on their own."""
        self._executor.shutdown(wait=False)

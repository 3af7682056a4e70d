"""Quote resolver: cached, denylist-aware fallback chain for one ticker."""

import asyncio
import logging
from typing import Iterable, Optional

from dashboard.domain.models import (
    FallbackQuote,
    QuoteResult,
    ResolvedQuote,
    UnavailableQuote,
)
from dashboard.providers.market_data_provider import QuoteProvider
from dashboard.repositories.protocols import QuoteCacheRepository

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 300
DEFAULT_FETCH_TIMEOUT_SECONDS = 3.0
DEFAULT_EXCHANGE_SUFFIX = ".NS"
DEFAULT_RECOGNIZED_SUFFIXES = (".NS", ".BO")
CACHE_KEY_PREFIX = "stock-"


class QuoteResolver:
    """
    Resolves a current price for one ticker.

    Order: fresh cache entry, denylist, primary source, secondary source,
    static fallback price. resolve() never raises; every failure ends in a
    quote whose source tag says which tier produced it.

    Primary and secondary results and denylist placeholders are cached.
    Static fallbacks are not, so the next request retries the network.
    """

    def __init__(
        self,
        primary: QuoteProvider,
        secondary: QuoteProvider,
        cache: QuoteCacheRepository,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        unavailable_symbols: Iterable[str] = (),
        exchange_suffix: str = DEFAULT_EXCHANGE_SUFFIX,
        recognized_suffixes: Iterable[str] = DEFAULT_RECOGNIZED_SUFFIXES,
    ):
        self._primary = primary
        self._secondary = secondary
        self._cache = cache
        self._cache_ttl = cache_ttl_seconds
        self._fetch_timeout = fetch_timeout_seconds
        self._unavailable = frozenset(s.strip().upper() for s in unavailable_symbols)
        self._exchange_suffix = exchange_suffix.upper()
        self._recognized_suffixes = tuple(s.upper() for s in recognized_suffixes)

    def normalize_ticker(self, ticker: str) -> str:
        """Uppercase and qualify with the exchange suffix unless one is already present."""
        symbol = (ticker or "").strip().upper()
        if symbol.endswith(self._recognized_suffixes):
            return symbol
        return f"{symbol}{self._exchange_suffix}"

    def base_symbol(self, ticker: str) -> str:
        """Strip any recognized exchange suffix."""
        symbol = (ticker or "").strip().upper()
        for suffix in self._recognized_suffixes:
            if symbol.endswith(suffix):
                return symbol[: -len(suffix)]
        return symbol

    @staticmethod
    def cache_key(symbol: str) -> str:
        return f"{CACHE_KEY_PREFIX}{symbol}"

    async def resolve(self, ticker: str, fallback_price: float) -> ResolvedQuote:
        """Return the best available quote for ticker, falling back to fallback_price."""
        symbol = self.normalize_ticker(ticker)
        key = self.cache_key(symbol)

        cached = self._cache.get_fresh(key, self._cache_ttl)
        if cached is not None:
            return ResolvedQuote(quote=cached.quote, from_cache=True)

        if self.base_symbol(symbol) in self._unavailable:
            quote: QuoteResult = UnavailableQuote(price=fallback_price)
            self._cache.put(key, quote)
            return ResolvedQuote(quote=quote)

        quote = await self._try_provider(self._primary, symbol)
        if quote is None:
            quote = await self._try_provider(self._secondary, symbol)
        if quote is None:
            return ResolvedQuote(quote=FallbackQuote(price=fallback_price))

        self._cache.put(key, quote)
        return ResolvedQuote(quote=quote)

    async def _try_provider(self, provider: QuoteProvider, symbol: str) -> Optional[QuoteResult]:
        """Run one provider under the fetch timeout; None on any failure."""
        try:
            return await asyncio.wait_for(provider.fetch_quote(symbol), timeout=self._fetch_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "%s timed out after %ss for %s", provider.name, self._fetch_timeout, symbol
            )
        except Exception as exc:
            logger.warning("%s failed for %s: %s", provider.name, symbol, exc)
        return None

"""Application context holding the process-wide services.

The quote cache must outlive individual requests, so the cache, providers,
resolver and aggregator are created once per process here and handed to
the API layer through dependencies.
"""

from collections.abc import Sequence
from typing import Optional

from dashboard.config.settings import Settings, get_settings
from dashboard.core.clock import Clock, SystemClock
from dashboard.domain.holdings import PORTFOLIO_HOLDINGS
from dashboard.domain.models import Holding
from dashboard.providers import AlphaVantageProvider, YahooFinanceProvider
from dashboard.repositories import InMemoryQuoteCacheRepository
from dashboard.services import PortfolioAggregator, QuoteResolver


class AppContext:
    """Lazily builds and owns the quote cache, providers and services."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        holdings: Sequence[Holding] = PORTFOLIO_HOLDINGS,
        clock: Optional[Clock] = None,
    ):
        self._settings = settings
        self._holdings = tuple(holdings)
        self._clock = clock or SystemClock()

        # Service instances (lazy initialized)
        self._quote_cache: Optional[InMemoryQuoteCacheRepository] = None
        self._primary: Optional[YahooFinanceProvider] = None
        self._secondary: Optional[AlphaVantageProvider] = None
        self._resolver: Optional[QuoteResolver] = None
        self._aggregator: Optional[PortfolioAggregator] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def quote_cache(self) -> InMemoryQuoteCacheRepository:
        """Get the process-wide quote cache."""
        if self._quote_cache is None:
            self._quote_cache = InMemoryQuoteCacheRepository(clock=self._clock)
        return self._quote_cache

    @property
    def primary_provider(self) -> YahooFinanceProvider:
        if self._primary is None:
            # One worker per holding so a full refresh never queues behind itself
            self._primary = YahooFinanceProvider(max_workers=max(1, len(self._holdings)))
        return self._primary

    @property
    def secondary_provider(self) -> AlphaVantageProvider:
        if self._secondary is None:
            settings = self.settings
            self._secondary = AlphaVantageProvider(
                api_key=settings.alpha_vantage_api_key,
                base_url=settings.alpha_vantage_url,
                timeout_seconds=settings.quote_fetch_timeout_seconds,
            )
        return self._secondary

    @property
    def resolver(self) -> QuoteResolver:
        """Get the QuoteResolver instance."""
        if self._resolver is None:
            settings = self.settings
            self._resolver = QuoteResolver(
                primary=self.primary_provider,
                secondary=self.secondary_provider,
                cache=self.quote_cache,
                cache_ttl_seconds=settings.quote_cache_ttl_seconds,
                fetch_timeout_seconds=settings.quote_fetch_timeout_seconds,
                unavailable_symbols=settings.unavailable_symbols,
                exchange_suffix=settings.exchange_suffix,
                recognized_suffixes=settings.recognized_suffixes,
            )
        return self._resolver

    @property
    def aggregator(self) -> PortfolioAggregator:
        """Get the PortfolioAggregator instance."""
        if self._aggregator is None:
            self._aggregator = PortfolioAggregator(
                holdings=self._holdings,
                resolver=self.resolver,
            )
        return self._aggregator

    async def aclose(self) -> None:
        """Release network resources and worker threads."""
        if self._primary is not None:
            await self._primary.aclose()
            self._primary = None
        if self._secondary is not None:
            await self._secondary.aclose()
            self._secondary = None
        self._resolver = None
        self._aggregator = None


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context

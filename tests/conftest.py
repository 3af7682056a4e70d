"""
Pytest configuration and fixtures for the portfolio dashboard tests.

This module provides:
- A manual clock for deterministic cache staleness
- Recording fake quote providers (succeeding, failing, slow)
- Resolver, aggregator and API client fixtures wired to the fakes
"""

import asyncio
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from dashboard.api.deps import get_portfolio_aggregator
from dashboard.app_context import set_app_context
from dashboard.config.settings import reset_settings
from dashboard.core.exceptions import QuoteSourceError
from dashboard.domain.models import Holding, PrimaryQuote, QuoteResult, SecondaryQuote
from dashboard.main import app
from dashboard.repositories import InMemoryQuoteCacheRepository
from dashboard.services import PortfolioAggregator, QuoteResolver


UNAVAILABLE = ("SAVANI", "BAJAJHLDNG", "GENSOL")


# =============================================================================
# CLOCK
# =============================================================================


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def quote_cache(clock: ManualClock) -> InMemoryQuoteCacheRepository:
    return InMemoryQuoteCacheRepository(clock=clock)


# =============================================================================
# QUOTE PROVIDERS
# =============================================================================


class RecordingProvider:
    """
    Quote provider returning fixed quotes per symbol and recording every call.

    Symbols without a configured quote raise QuoteSourceError.
    """

    def __init__(self, name: str, quotes: Optional[dict[str, QuoteResult]] = None):
        self.name = name
        self.quotes = dict(quotes or {})
        self.calls: list[str] = []

    async def fetch_quote(self, symbol: str) -> QuoteResult:
        self.calls.append(symbol)
        if symbol not in self.quotes:
            raise QuoteSourceError(self.name, symbol, "no quote configured")
        return self.quotes[symbol]


class FailingProvider(RecordingProvider):
    """Provider whose every call fails with a transport error."""

    async def fetch_quote(self, symbol: str) -> QuoteResult:
        self.calls.append(symbol)
        raise ConnectionError("Network unavailable")


class SlowProvider(RecordingProvider):
    """Provider that never answers within any reasonable timeout."""

    async def fetch_quote(self, symbol: str) -> QuoteResult:
        self.calls.append(symbol)
        await asyncio.sleep(10)
        return PrimaryQuote(price=1.0)


@pytest.fixture
def primary() -> RecordingProvider:
    """Primary source with quotes for a few NSE symbols."""
    return RecordingProvider(
        "yahoo",
        {
            "HDFCBANK.NS": PrimaryQuote(price=1650.0, pe_ratio=19.5, latest_earnings=84.6),
            "TCS.NS": PrimaryQuote(price=3900.0, pe_ratio=30.1, latest_earnings=129.4),
            "INFY.NS": PrimaryQuote(price=120.0),
        },
    )


@pytest.fixture
def secondary() -> RecordingProvider:
    """Secondary source that only knows DMART."""
    return RecordingProvider("alpha", {"DMART.NS": SecondaryQuote(price=88.5, pe_ratio=95.2)})


def make_resolver(primary, secondary, cache, **kwargs) -> QuoteResolver:
    kwargs.setdefault("unavailable_symbols", UNAVAILABLE)
    kwargs.setdefault("fetch_timeout_seconds", 0.5)
    return QuoteResolver(primary=primary, secondary=secondary, cache=cache, **kwargs)


@pytest.fixture
def resolver(primary, secondary, quote_cache) -> QuoteResolver:
    return make_resolver(primary, secondary, quote_cache)


# =============================================================================
# HOLDINGS AND AGGREGATOR
# =============================================================================


@pytest.fixture
def holdings() -> list[Holding]:
    """Small portfolio covering primary, secondary, fallback and denylist paths."""
    return [
        Holding(1, "HDFC Bank", 1490, 50, "HDFCBANK", "Financial", fallback_price=1700.15),
        Holding(5, "Savani Financials", 24, 1080, "SAVANI", "Financial", fallback_price=14.86),
        Holding(11, "TCS", 3500, 10, "TCS", "Technology", fallback_price=3800),
        Holding(17, "Dmart", 100, 10, "DMART", "Consumer", fallback_price=90),
        Holding(19, "Pidilite", 2376, 36, "PIDILITIND", "Consumer", fallback_price=2730),
        Holding(38, "Infy", 100, 10, "INFY", "Sold", sold_price=1920, fallback_price=1725.3),
    ]


@pytest.fixture
def aggregator(holdings, resolver) -> PortfolioAggregator:
    return PortfolioAggregator(holdings=holdings, resolver=resolver)


# =============================================================================
# API
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_globals():
    """Isolate global settings, app context and dependency overrides per test."""
    reset_settings()
    set_app_context(None)
    yield
    app.dependency_overrides.clear()
    set_app_context(None)
    reset_settings()


@pytest.fixture
def client(aggregator: PortfolioAggregator) -> TestClient:
    """API client whose portfolio endpoint uses the fake-backed aggregator."""
    app.dependency_overrides[get_portfolio_aggregator] = lambda: aggregator
    return TestClient(app)

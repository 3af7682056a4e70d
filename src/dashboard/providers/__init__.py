"""Market data providers module."""

from dashboard.providers.market_data_provider import QuoteProvider
from dashboard.providers.yahoo_provider import YahooFinanceProvider
from dashboard.providers.alpha_vantage_provider import AlphaVantageProvider

__all__ = [
    "QuoteProvider",
    "YahooFinanceProvider",
    "AlphaVantageProvider",
]

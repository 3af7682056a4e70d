"""Secondary quote source: Alpha Vantage GLOBAL_QUOTE."""

import logging
from typing import Any, Optional

import httpx

from dashboard.core.exceptions import QuoteSourceError
from dashboard.domain.models import SecondaryQuote
from dashboard.providers.market_data_provider import parse_optional_metric, parse_price

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"


def _extract_quote(symbol: str, payload: Any) -> SecondaryQuote:
    """
    Build a SecondaryQuote from a GLOBAL_QUOTE response.

    Alpha Vantage reports every field as a string, and answers rate-limited
    or unknown symbols with 200 and an empty or missing "Global Quote".
    """
    data = payload.get("Global Quote") if isinstance(payload, dict) else None
    if not data:
        raise QuoteSourceError(AlphaVantageProvider.name, symbol, "missing Global Quote")
    price = parse_price(data.get("05. price"))
    if price is None:
        raise QuoteSourceError(AlphaVantageProvider.name, symbol, "missing or invalid price")
    return SecondaryQuote(price=price, pe_ratio=parse_optional_metric(data.get("PE Ratio")))


class AlphaVantageProvider:
    """Fetches quotes from the Alpha Vantage GLOBAL_QUOTE endpoint."""

    name = "alpha"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 3.0,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def fetch_quote(self, symbol: str) -> SecondaryQuote:
        params = {"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self._api_key}
        try:
            response = await self._client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise QuoteSourceError(self.name, symbol, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise QuoteSourceError(self.name, symbol, "response is not JSON") from exc
        quote = _extract_quote(symbol, payload)
        logger.debug("Alpha Vantage quote for %s: %s", symbol, quote.price)
        return quote

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

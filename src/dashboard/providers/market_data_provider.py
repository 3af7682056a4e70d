"""Quote provider protocol and shared parsing helpers."""

import math
from typing import Any, Optional, Protocol

from dashboard.domain.models import QuoteResult


class QuoteProvider(Protocol):
    """
    Protocol for remote quote sources.

    Implementations fetch one exchange-qualified symbol and either return a
    quote tagged with their own provenance or raise QuoteSourceError.
    Timeouts are applied by the caller.
    """

    name: str

    async def fetch_quote(self, symbol: str) -> QuoteResult:
        """Fetch the current quote for an exchange-qualified symbol."""
        ...


def parse_price(value: Any) -> Optional[float]:
    """Coerce a numeric or numeric-string field to a positive finite float; else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def parse_optional_metric(value: Any) -> Optional[float]:
    """Coerce an optional ratio/earnings field; missing, zero or unparseable reads as None."""
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number == 0:
        return None
    return number

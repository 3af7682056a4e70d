"""Static holding model."""

from dataclasses import dataclass
from typing import Optional

# Fallback markup applied to the purchase price when no last-known price is set
DEFAULT_FALLBACK_MARKUP = 1.1


@dataclass(frozen=True)
class Holding:
    """
    One stock position tracked by the portfolio.

    Defined once at process start and never mutated.
    """

    id: int
    particulars: str
    purchase_price: float
    quantity: float
    symbol: str
    sector: str
    sold_price: Optional[float] = None
    fallback_price: Optional[float] = None

    @property
    def effective_fallback_price(self) -> float:
        """Last-known price, or purchase price plus markup when none is configured."""
        if self.fallback_price:
            return self.fallback_price
        return self.purchase_price * DEFAULT_FALLBACK_MARKUP

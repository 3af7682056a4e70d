"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: int = 400):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class QuoteSourceError(AppError):
    """Raised by a quote provider when it cannot produce a usable quote."""

    def __init__(self, source: str, symbol: str, reason: str):
        self.source = source
        self.symbol = symbol
        super().__init__(
            f"{source} quote failed for {symbol}: {reason}",
            code="QUOTE_SOURCE_ERROR",
            status_code=502,
        )


class PortfolioUnavailableError(AppError):
    """Raised when the portfolio snapshot cannot be assembled."""

    def __init__(self, message: str = "Failed to fetch portfolio data"):
        super().__init__(message, code="PORTFOLIO_UNAVAILABLE", status_code=500)

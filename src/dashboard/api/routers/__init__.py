"""API routers package."""

from dashboard.api.routers.portfolio import router as portfolio_router

__all__ = [
    "portfolio_router",
]

"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dashboard.api.routers import portfolio_router
from dashboard.api.routers.portfolio import NO_CACHE_HEADERS
from dashboard.app_context import get_app_context
from dashboard.config.logging_config import setup_logging
from dashboard.config.settings import get_settings
from dashboard.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown
    await get_app_context().aclose()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Live NSE portfolio valuation with sector and portfolio summaries",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=NO_CACHE_HEADERS,
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "portfolio": "/api/portfolio",
        "refreshIntervalSeconds": settings.refresh_interval_seconds,
    }

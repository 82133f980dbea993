"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from networth.app_context import AppContext
from networth.config.settings import get_settings
from networth.config.logging_config import setup_logging
from networth.api.routers import portfolio_router, ledgers_router, fx_router
from networth.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: the rate cache is loaded once and shared by all requests
    setup_logging()
    context = AppContext(get_settings())
    context.initialize()
    app.state.context = context
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Net worth tracking with historical FX valuation",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(portfolio_router)
app.include_router(ledgers_router)
app.include_router(fx_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }

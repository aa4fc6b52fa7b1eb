"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finbot.config.settings import get_settings
from finbot.config.logging_config import setup_logging
from finbot.repositories.sqlalchemy.database import init_db
from finbot.api.routers import insights_router, chat_router
from finbot.core.exceptions import AppError
from finbot.services import RateLimiter


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown
    app.state.rate_limiter.clear()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal finance assistant: financial snapshots and AI chat",
    version=settings.app_version,
    lifespan=lifespan,
)

# Counters are per process; each worker enforces its own limits
app.state.rate_limiter = RateLimiter.from_settings(settings)

# Include routers
app.include_router(insights_router)
app.include_router(chat_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
        headers=exc.headers,
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

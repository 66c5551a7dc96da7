"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, finbot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finbot import __version__
from finbot.api.deps.dependencies import get_service_cache
from finbot.boundary.db import create_tables
from finbot.configs import Settings, get_settings
from finbot.observability import configure_logging
from finbot.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    deliver_router,
    health_router,
    sessions_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup configures logging, creates tables and pre-warms the service
    cache; shutdown clears the cache.
    """
    configure_logging()
    settings = get_settings()
    logger.info(f"{__name__}:lifespan - Starting environment={settings.environment} debug={settings.debug}")
    await create_tables()

    logger.info(f"{__name__}:lifespan - Pre-warming service cache")
    cache = get_service_cache()
    cache.warm()
    logger.info(f"{__name__}:lifespan - Service cache pre-warmed")

    yield

    cache.clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (defaults to the cached settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    app = FastAPI(
        title="FinancialBot API",
        description="Knowledge-grounded market assistant with progressive profiling",
        version=__version__,
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # All routers under /api/v1
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(deliver_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "finbot.api.main:app",
        host="0.0.0.0",
        port=8000,
    )

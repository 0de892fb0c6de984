"""
FastAPI application factory.

Creates and configures the FastAPI application with middleware and routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_settings
from ..services.calendar import get_calendar
from .middleware import error_handler_middleware
from .routes import health, options

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup tasks.

    Builds the default expiration calendar on startup so the first
    request does not pay for it.
    """
    calendar = get_calendar(get_settings())
    logger.info(f"Expiration calendar ready: {calendar.first} to {calendar.last}")
    yield


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance

    Configuration:
        - CORS middleware for cross-origin requests
        - Error handling middleware for domain exceptions
        - Health check endpoint
        - Interactive API docs at /docs and /redoc
    """
    app = FastAPI(
        title="Standard Options API",
        description="Monthly expirations, strike ladders and OCC-style option symbols",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Error handling middleware
    app.middleware("http")(error_handler_middleware)

    # Register routes
    app.include_router(health.router)
    app.include_router(options.router)

    return app

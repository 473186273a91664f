"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, and includes
the API routers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from kenko.main.config import AppSettings, get_settings
from kenko.main.container import app_lifespan, init_container
from kenko.presentation.controllers import metrics_router, system_router
from kenko.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
# This ensures we have logging during the configuration loading process
configure_logging()

# Update logging with complete settings
update_logging_from_settings(get_settings())

# Get structured logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    The checker runs for exactly as long as the application is serving:
    it starts with the app and is stopped gracefully on shutdown.
    """
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()

    # Initialize dependency injection container
    init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(system_router)
    app.include_router(metrics_router)

    return app


app = create_app()

"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagesift import __version__
from pagesift.adapters.wikipedia.adapter import WikipediaAdapter
from pagesift.api.deps import set_adapter
from pagesift.api.v1.router import router as v1_router
from pagesift.config.settings import Settings
from pagesift.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        # Auto-detect pagesift-config.yaml if present
        yaml_path = Path("pagesift-config.yaml")
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting PageSift v%s", __version__)

        adapter = WikipediaAdapter.from_settings(settings.wikipedia)
        await adapter.initialize()
        set_adapter(adapter)

        app.state.settings = settings
        app.state.adapter = adapter

        logger.info("PageSift is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down PageSift...")
        await adapter.shutdown()
        set_adapter(None)
        logger.info("PageSift shutdown complete")

    app = FastAPI(
        title="PageSift",
        description="Wikipedia full-text search reshaped into a stable, UI-friendly result page.",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    return app

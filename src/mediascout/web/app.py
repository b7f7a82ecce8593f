"""FastAPI application factory for mediascout."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mediascout.config import Settings, get_settings
from mediascout.discovery.tmdb_client import TmdbDiscoveryClient
from mediascout.search.jackett_client import JackettClient
from mediascout.web.middleware import RequestLoggingMiddleware, setup_cors
from mediascout.web.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log service boundaries; the proxies hold no long-lived resources."""
    settings: Settings = app.state.settings
    logger.info("mediascout starting (jackett=%s, tmdb=%s)", settings.jackett_url, settings.tmdb_base_url)
    try:
        yield
    finally:
        logger.info("mediascout shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Raises:
        ConfigurationError: If a required credential is missing.
    """
    if settings is None:
        settings = get_settings()
    settings.validate_required()

    app = FastAPI(title="mediascout", lifespan=lifespan)
    app.state.settings = settings
    app.state.searcher = JackettClient(
        settings.jackett_url,
        settings.jackett_api_key,
        timeout=settings.http_timeout_seconds,
    )
    app.state.discoverer = TmdbDiscoveryClient(
        settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        image_base_url=settings.tmdb_image_base_url,
        timeout=settings.http_timeout_seconds,
    )
    setup_cors(app, settings.cors_origin_list)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(router)
    return app

"""Storefront API — FastAPI application factory.

Invariants:
    - Routes registered explicitly, all under /api
    - Global error handlers map every failure to ``{"error": message}``
    - The document store is injected, never looked up from a global path
    - Static files (when present) are mounted AFTER the API routes
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from storefront.domain.repository.document_store import DocumentStore
from storefront.infrastructure.bootstrap import document_store
from storefront.infrastructure.http.error_handlers import register_error_handlers
from storefront.infrastructure.http.routes import health, orders, products
from storefront.infrastructure.observability import (
    install_async_exception_handler,
    setup_logging,
)
from storefront.infrastructure.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: DocumentStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = document_store(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        install_async_exception_handler(asyncio.get_running_loop())
        logger.info(
            "Storefront API started on http://%s:%s/api",
            settings.host,
            settings.port,
            extra={"data_file": str(settings.data_file)},
        )
        yield
        logger.info("Storefront API shutting down")

    app = FastAPI(title="Storefront API", version="1.0.0", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(orders.router)

    register_error_handlers(app)

    if settings.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    return app

"""Catalog API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Router catalog routes registered before plan routes: /plans/routers must
      not be captured by /plans/{name}
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import health, plans, routers
from catalog.config import get_settings
from catalog.infrastructure.database import init_db
from catalog.infrastructure.observability import setup_logging
from catalog.infrastructure.platform_config import get_platform_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    get_platform_config()
    logger.info("Catalog API started")
    yield
    await manager.dispose()
    logger.info("Catalog API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Plan & Router Catalog API", version="1.0.0", lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(health.router)
    application.include_router(routers.router)
    application.include_router(plans.router)
    register_error_handlers(application)
    return application


app = create_app()

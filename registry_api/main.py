"""Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": <message>}
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (one registration call here)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from registry_api.api.error_handlers import register_error_handlers
from registry_api.api.routes import health, registry
from registry_api.config import get_settings
from registry_api.infrastructure.database import close_db, init_db
from registry_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(
        "Registry API started",
        extra={"sheet_name": settings.sheet_name},
    )
    yield
    await close_db()
    logger.info("Registry API shutting down")


app = FastAPI(
    title="Registry API", version="1.0.0", lifespan=lifespan,
)

# CORS — the registry website calls both entry points from the browser
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(registry.router)

register_error_handlers(app)

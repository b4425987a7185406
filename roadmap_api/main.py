"""Roadmap API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RoadmapError → JSON {"error": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database pool created on startup and drained on shutdown via lifespan
    - OpenAPI description served under settings.docs_url

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roadmap_api.api.error_handlers import register_error_handlers
from roadmap_api.api.routes import areas, health, phases, tasks, templates
from roadmap_api.config import get_settings
from roadmap_api.infrastructure.database import close_db, init_db
from roadmap_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info("Roadmap API started")
    yield
    logger.info("Roadmap API shutting down")
    await close_db()


settings = get_settings()

app = FastAPI(
    title="Roadmap API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=settings.docs_url,
    openapi_url=settings.openapi_url,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(health.router)
app.include_router(templates.router)
app.include_router(areas.router)
app.include_router(phases.router)
app.include_router(tasks.router)

register_error_handlers(app)

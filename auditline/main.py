"""Auditline — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auditline.adapters.persistence.database import engine
from auditline.application.use_cases.build_timeline import TimelineCache
from auditline.config import settings
from auditline.infrastructure.api.routes_health import router as health_router
from auditline.infrastructure.api.routes_timeline import router as timeline_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.timeline_cache = TimelineCache(settings.timeline_cache_size)
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    app.state.timeline_cache.clear()
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Auditline — Auditor Timeline",
        description="Canonical auditor identities and packed assignment timelines",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the dashboard frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(timeline_router, prefix="/api")

    return app


app = create_app()

"""
FastAPI application factory + lifespan.

This is the HTTP surface of chartkit:
- REST API to render chart definitions and hit-test pointer locations.
- CORS configured for browser front-ends.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chartkit import __version__
from chartkit.api.v1 import api_router
from chartkit.core.config import settings
from chartkit.services.charts.engine import chart_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log the registered charts.  Shutdown: log and exit."""
    logger.info(f"Starting {settings.APP_NAME} API …")
    logger.info(f"Registered charts: {', '.join(chart_engine.registered_charts())}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} API …")


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="chartkit API",
        description="Chart geometry and touch interaction",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": __version__,
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn chartkit.main:app``
app = create_fastapi_app()

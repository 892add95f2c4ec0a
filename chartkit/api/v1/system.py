"""System endpoints — health check and registered charts."""

from fastapi import APIRouter

from chartkit.core.config import settings
from chartkit.services.charts.engine import chart_engine

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "ok",
        "env": settings.APP_ENV,
        "charts": chart_engine.registered_charts(),
    }

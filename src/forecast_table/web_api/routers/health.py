"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from forecast_table import __version__
from forecast_table.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Reports the upstream the app will query; the upstream itself is not probed.
    """
    return {"status": "ready", "backend": settings.BACKEND_API_URL}

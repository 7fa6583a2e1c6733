"""Liveness and readiness endpoints."""

from fastapi import APIRouter, HTTPException, status

from swimlog import __version__, get_logger
from swimlog.api.dependencies import SettingsDep, SupabaseDep

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    return {"status": "healthy"}


@router.get("/health/ready")
def readiness_check(settings: SettingsDep, client: SupabaseDep) -> dict:
    """Ready once the time_entries table answers a one-row query."""
    try:
        client.table("time_entries").select("id").limit(1).execute()
    except Exception as e:
        logger.error("readiness_check_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not reachable",
        ) from e

    return {
        "status": "ready",
        "version": __version__,
        "environment": settings.environment.value,
        "database": "connected",
    }

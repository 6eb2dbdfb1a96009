"""
Health check endpoints
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Request
from sqlalchemy import text

from gallery.config.settings import get_settings
from gallery.core.database import request_session

router = APIRouter()


@router.get("/")
async def health_check() -> Dict[str, str]:
    """Basic health check."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "catalog_source": settings.CATALOG_SOURCE,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
async def readiness_check(request: Request) -> Dict[str, str]:
    """Readiness check including database connectivity."""
    if get_settings().CATALOG_SOURCE == "static":
        db_status = "not used"
    else:
        try:
            async with request_session(request) as db:
                await db.execute(text("SELECT 1"))
            db_status = "connected"
        except Exception as e:
            db_status = f"error: {str(e)}"

    return {
        "status": "ready" if db_status in ("connected", "not used") else "not ready",
        "database": db_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

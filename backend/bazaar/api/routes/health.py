"""Health & Readiness Probes — is the moderation service up, and can it record rejections.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 only when rejections must be recorded and
      the database is unreachable
    - Readiness reports which moderation switches are active

Design Decisions:
    - With RECORD_REJECTIONS=false the rules need no database, so a DB outage
      does not take the service out of rotation
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import bazaar.infrastructure.database as database
from bazaar.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "bazaar-moderation"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe: database connectivity plus active moderation switches."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    checks = {
        "database": "healthy" if db_ok else "unavailable",
        "record_rejections": settings.record_rejections,
        "rate_limit_enabled": settings.rate_limit_enabled,
    }
    if not db_ok and settings.record_rejections:
        logger.warning("Readiness failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
                "checks": checks,
            },
        )
    return {"status": "ready", "checks": checks}

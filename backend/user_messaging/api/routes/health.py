"""Health Routes — process liveness and store readiness.

Invariants:
    - GET /health answers 200 whenever the app can serve a request
    - GET /health/ready answers 200 only if the shared store handle runs SELECT 1;
      503 when the handle is missing or the store is unreachable
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from user_messaging.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "user-messaging-api"
SERVICE_VERSION = "1.0.0"

NOT_READY = {"status": "not_ready", "reason": "database_unavailable"}


@router.get("")
async def liveness():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness():
    """Ready when the store opened at startup answers a trivial query."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=NOT_READY,
        )
    return {"status": "ready", "checks": {"database": "healthy"}}

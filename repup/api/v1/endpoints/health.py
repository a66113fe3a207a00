"""Health check endpoints for load balancers and monitoring."""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from repup.api.deps import get_debug_service
from repup.services.debug import DebugService

router = APIRouter()


@router.get("")
async def liveness():
    """The process is up. Includes built_at when BACKEND_BUILT_AT is set."""
    built_at = os.environ.get("BACKEND_BUILT_AT")
    return {"status": "ok", "built_at": built_at} if built_at else {"status": "ok"}


@router.get("/ready")
async def readiness(service: DebugService = Depends(get_debug_service)):
    """Ready to serve: the database answers the liveness probe in time."""
    snapshot = await service.health()
    if snapshot["db_status"] != "healthy":
        return JSONResponse(status_code=503, content={"status": "error", "database": "unreachable"})
    return {"status": "ok", "database": "connected"}

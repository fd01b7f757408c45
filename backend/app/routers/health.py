"""
Health check router for liveness probes.
"""
import time

from fastapi import APIRouter, Request, status

from app.schemas.server import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check(request: Request):
    """
    Basic health check endpoint.
    Returns 200 while the process is running, whether or not the database is reachable.
    """
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(uptime=time.monotonic() - started_at)

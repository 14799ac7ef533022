"""
Health Check Router
"""

import time
from fastapi import APIRouter
from eth_proxy import __version__
from eth_proxy.api.models import HealthResponse

router = APIRouter(prefix="", tags=["Health"])

# Track server start time
_server_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check API service health.

    Does not contact the upstream API.
    """
    now = time.time()
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=int(now),
        uptime_seconds=int(now - _server_start_time),
    )

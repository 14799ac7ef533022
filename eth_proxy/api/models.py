"""
API Request/Response Models

Pydantic models for response serialization.
"""

from pydantic import BaseModel


class FailureResponse(BaseModel):
    """Body of every failed request; the status travels on the response."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: int
    uptime_seconds: int

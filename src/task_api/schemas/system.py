"""Common system-level response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Payload returned by the health check endpoint."""

    status: str = Field(default="ok", description="Service health indicator")
    uptime: float = Field(ge=0, description="Seconds elapsed since the application started")


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    message: str = Field(description="Human-readable error message")

"""Schemas shared by every router: errors, health, uploads."""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Service is invalid",
            "details": {"errors": {"url": "url must be a valid URL"}},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class LogoUploadResponse(BaseModel):
    path: str = Field(description="Path relative to the logo storage root")
    url: str = Field(description="URL the stored logo is served from")


def reject_null(value):
    """PATCH fields that may be omitted but not cleared: explicit null is a 422."""
    if value is None:
        raise ValueError("may not be null")
    return value

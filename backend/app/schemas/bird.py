"""
Aviary Backend — Pydantic Schemas
===================================

What:  Pydantic models describing bird records on the wire and in seed files.
Why:   The JSON shape of a bird is fixed (five fields), so it is declared once
       here instead of relying on implicit ORM-to-JSON conversion.
How:   BirdResponse validates from ORM attributes and serializes timestamps as
       ISO-8601 UTC with millisecond precision (2019-05-09T11:07:58.188Z).
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer


def format_timestamp(value: datetime) -> str:
    """
    Renders a timestamp as ISO-8601 UTC with milliseconds and a trailing Z.

    Naive datetimes are treated as UTC; SQLite hands them back without tzinfo
    even for timezone-aware columns.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BirdResponse(BaseModel):
    """
    What:  One bird as returned by GET /birds.
    Why:   Exactly the five stored fields, in storage order, nothing computed.
    """
    id: int = Field(description="Unique bird identifier")
    name: Optional[str] = Field(default=None, description="Common name")
    species: Optional[str] = Field(default=None, description="Binomial name")
    created_at: datetime = Field(description="Creation time (UTC ISO 8601)")
    updated_at: datetime = Field(description="Last modification time (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class BirdEnvelope(BaseModel):
    """
    What:  The envelope form of GET /birds.
    Who:   Used for OpenAPI documentation of the envelope render mode.
    """
    birds: List[BirdResponse] = Field(description="All birds in id order")
    messages: List[str] = Field(description="Fixed list of greeting messages")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    bird_count: Optional[int] = Field(default=None, description="Rows in the birds table")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Seed Models
# ══════════════════════════════════════════════════════════════════════════


class BirdSeed(BaseModel):
    """One entry of a seed file: {"name": ..., "species": ...}."""
    name: Optional[str] = None
    species: Optional[str] = None

    model_config = {"extra": "forbid"}

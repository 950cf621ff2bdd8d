"""
Shared response schemas - errors and health
"""

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Error body returned by the notes endpoints."""

    message: str = Field(description="Human-readable message, never internal details")

    model_config = ConfigDict(json_schema_extra={"example": {"message": "Note not found"}})


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="ok when the store answers, degraded otherwise")
    database: str = Field(description="connected or disconnected")
    mongo: str = Field(description="Same value as database, under the key older health checks read")
    db: str = Field(description="Database name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "ok", "database": "connected", "mongo": "connected", "db": "sharednotes"}
        }
    )

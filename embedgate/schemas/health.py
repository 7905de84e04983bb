"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    meta_store: str = Field(..., description="Configured entry meta store backend")
    meta_store_available: bool = Field(..., description="False when the embed cache is disabled")

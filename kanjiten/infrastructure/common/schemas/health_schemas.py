from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Schema for the public health check."""

    status: Literal["ok"] = Field("ok", description="Process liveness")
    timestamp: datetime = Field(..., description="Server time (UTC)")
    database: Literal["connected", "disconnected"] = Field(
        ..., description="Result of a trivial query against the store"
    )
    environment: str = Field(..., description="Deployment environment")
    version: str = Field(..., description="API version")

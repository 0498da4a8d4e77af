"""Common infrastructure schemas."""

from kanjiten.infrastructure.common.schemas.health_schemas import HealthResponse
from kanjiten.infrastructure.common.schemas.response_wrappers import (
    CamelModel,
    ErrorResponse,
    SuccessResponse,
)

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
]

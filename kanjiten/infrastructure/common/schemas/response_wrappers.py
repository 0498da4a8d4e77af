"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys, the client's wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str | None = Field(None, description="Response message")


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")

"""Pydantic schemas for identity API responses."""

from pydantic import BaseModel, Field

from kanjiten.infrastructure.common.schemas import CamelModel


class VerifiedUser(CamelModel):
    """Schema for the user identified by a verified token."""

    id: str = Field(..., description="User ID issued by the identity provider")
    username: str | None = Field(None, description="Account username")
    email: str | None = Field(None, description="Account email")
    is_anonymous: bool = Field(False, description="Whether this is a guest account")


class TokenVerifyResponse(BaseModel):
    """Schema for token verification response."""

    success: bool = Field(..., description="Whether the request was successful")
    valid: bool = Field(..., description="Whether the token is valid")
    user: VerifiedUser = Field(..., description="The verified user")

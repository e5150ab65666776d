"""Profile schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pennywise.domain.profile import Profile


class ProfileResponse(BaseModel):
    """The authenticated user's profile."""

    id: UUID = Field(description="Identity provider user id")
    email: Optional[str] = Field(None, description="Contact email")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class ProfileUpdateRequest(BaseModel):
    """Request schema for updating the profile."""

    email: Optional[str] = Field(None, max_length=255, description="New email")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "jane@example.com"}},
    )

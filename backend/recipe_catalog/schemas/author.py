"""Author Schemas — request/response models for /authors.

Invariants:
    - AuthorCreate.name: 1-255 chars, stripped, non-empty
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorCreate(BaseModel):
    """Author creation and update payload."""
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class AuthorResponse(BaseModel):
    """Author response — public-facing author data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_at: datetime

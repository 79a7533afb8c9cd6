"""Recipe Schemas — request/response models for /recipes.

Invariants:
    - RecipeCreate.title: 1-255 chars, stripped, non-empty
    - description bounded to DESCRIPTION_MAX_LENGTH; instructions unbounded
    - author_id optional; existence checked by the catalog service
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipe_catalog.models.recipe import DESCRIPTION_MAX_LENGTH


class RecipeCreate(BaseModel):
    """Recipe creation and full-update payload."""
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    instructions: str | None = None
    author_id: UUID | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class RecipeResponse(BaseModel):
    """Recipe response — public-facing recipe data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None = None
    instructions: str | None = None
    author_id: UUID | None = None
    created_at: datetime

"""Ingredient Schemas — request/response models for /recipes/{id}/ingredients.

Invariants:
    - quantity must be non-negative (0 accepted); rejected here → 400 before any DB work
    - name: 1-255 chars, stripped, non-empty
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recipe_catalog.core.validate_quantity import validate_quantity


class IngredientCreate(BaseModel):
    """Ingredient creation and full-update payload."""
    name: str = Field(min_length=1, max_length=255)
    quantity: float
    unit: str | None = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("quantity")
    @classmethod
    def check_quantity(cls, v: float) -> float:
        error = validate_quantity(v)
        if error:
            raise ValueError(error["message"])
        return v


class IngredientResponse(BaseModel):
    """Ingredient response — public-facing ingredient data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    recipe_id: UUID
    name: str
    quantity: float
    unit: str | None = None
    created_at: datetime

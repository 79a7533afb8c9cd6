"""Ingredient ORM — a named, measured component of exactly one recipe.

Invariants:
    - Always belongs to a Recipe (recipe_id FK, ON DELETE CASCADE)
    - quantity is non-negative — enforced on every assignment via @validates,
      backed by a CHECK constraint in the database
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from sqlalchemy.dialects.postgresql import UUID

from recipe_catalog.core.validate_quantity import enforce_quantity
from recipe_catalog.db.base import Base


class Ingredient(Base):
    """Ingredient entity — name, quantity and unit within a recipe."""
    __tablename__ = "ingredients"
    __table_args__ = (
        CheckConstraint(
            "quantity >= 0", name="quantity_non_negative",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    recipe_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    recipe: Mapped["Recipe"] = relationship(
        "Recipe", back_populates="ingredients",
    )

    @validates("quantity")
    def _validate_quantity(self, key: str, value: float) -> float:
        return enforce_quantity(value)

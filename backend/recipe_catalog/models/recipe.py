"""Recipe ORM — a titled recipe with free-text description and instructions.

Invariants:
    - description bounded to 1000 characters; instructions unbounded
    - author_id is nullable; when set it must reference an existing author (FK)
    - Deleting a recipe deletes its ingredients (ORM delete-orphan + ON DELETE CASCADE)

Design Decisions:
    - author_id FK without ON DELETE: a raw author delete that would orphan
      recipes fails at the DB instead of silently leaving them behind
    - created_at used as the stable ordering key for listings and search
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from recipe_catalog.db.base import Base

DESCRIPTION_MAX_LENGTH = 1000


class Recipe(Base):
    """Recipe entity — optionally authored, owns its ingredients."""
    __tablename__ = "recipes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True,
    )
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("authors.id"), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    author: Mapped["Author | None"] = relationship(
        "Author", back_populates="recipes",
    )
    ingredients: Mapped[list["Ingredient"]] = relationship(
        "Ingredient", back_populates="recipe",
        cascade="all, delete-orphan", passive_deletes=True,
    )

"""Author ORM — the owner of recipes for lifecycle purposes.

Invariants:
    - id is UUID primary key, assigned on insert, immutable
    - name is non-nullable

Design Decisions:
    - No ORM cascade to recipes: author deletion goes through the cascade
      service, which deletes children explicitly inside one transaction
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from recipe_catalog.db.base import Base


class Author(Base):
    """Author entity — writes recipes."""
    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    recipes: Mapped[list["Recipe"]] = relationship(
        "Recipe", back_populates="author", passive_deletes="all",
    )

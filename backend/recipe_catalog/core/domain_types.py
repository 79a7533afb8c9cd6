"""Domain Types — identity wrappers and enums for the recipe catalog.

Invariants:
    - AuthorId, RecipeId, IngredientId wrap UUIDs assigned by the store
    - Identifiers are immutable once assigned
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

AuthorId = NewType("AuthorId", UUID)
RecipeId = NewType("RecipeId", UUID)
IngredientId = NewType("IngredientId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class SearchField(str, Enum):
    """Fields a keyword can match. Author and ingredient names are one join hop away."""
    TITLE = "title"
    DESCRIPTION = "description"
    INSTRUCTIONS = "instructions"
    AUTHOR_NAME = "author_name"
    INGREDIENT_NAME = "ingredient_name"


class DeletionState(str, Enum):
    """Author cascade deletion states.

    Requested -> Validated -> CascadeResolved -> Committed (success)
    Requested -> Validated -> Rejected (author absent)
    """
    REQUESTED = "requested"
    VALIDATED = "validated"
    CASCADE_RESOLVED = "cascade_resolved"
    COMMITTED = "committed"
    REJECTED = "rejected"


class DeletionOutcome(str, Enum):
    """What the caller sees after a cascade deletion request."""
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class EntityKind(str, Enum):
    """The three catalog entity kinds, for cascade steps and error context."""
    AUTHOR = "Author"
    RECIPE = "Recipe"
    INGREDIENT = "Ingredient"

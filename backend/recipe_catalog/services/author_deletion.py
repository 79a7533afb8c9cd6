"""Author Cascade Deletion — removes an author with every recipe and ingredient it owns.

Invariants:
    - One transaction per request: all rows go, or none do
    - Existence is checked inside that transaction with a row lock
    - Delete order is ingredients → recipes → author (FK-safe)
    - Absent author → NOT_FOUND with no writes; repeating a delete is NOT_FOUND again
    - Store failures → FAILED with a sanitized reason; never a raw DB message

Design Decisions:
    - Cascade planned in core (plan_author_cascade), executed here: impureim sandwich
    - Explicit child deletes over ON DELETE CASCADE on recipes.author_id: a raw
      author delete must fail loudly rather than silently take recipes with it
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from recipe_catalog.core.author_cascade import CascadePlan, plan_author_cascade
from recipe_catalog.core.domain_types import (
    AuthorId, DeletionOutcome, DeletionState, EntityKind,
)
from recipe_catalog.core.errors import DatabaseError
from recipe_catalog.core.repository_protocols import CatalogStore

logger = logging.getLogger(__name__)


@dataclass
class DeletionResult:
    """Outcome of one cascade request plus the last state it reached."""
    outcome: DeletionOutcome
    author_id: UUID
    state: DeletionState
    recipes_deleted: int = 0
    ingredients_deleted: int = 0
    reason: str | None = None


class AuthorCascadeDeletion:
    """Integrity engine for author deletion."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def delete_author_cascade(self, author_id: AuthorId) -> DeletionResult:
        state = DeletionState.REQUESTED
        try:
            async with self.store.transaction():
                author = await self.store.authors.get_for_update(author_id)
                state = DeletionState.VALIDATED
                if author is None:
                    logger.info(
                        f"Author {author_id} not found, nothing deleted",
                        extra={"author_id": author_id, "outcome": "not_found"},
                    )
                    return DeletionResult(
                        DeletionOutcome.NOT_FOUND, author_id,
                        DeletionState.REJECTED,
                    )

                plan = await self._resolve_cascade(author_id)
                state = DeletionState.CASCADE_RESOLVED
                await self._execute(plan)
        except DatabaseError as e:
            logger.error(
                f"Cascade delete of author {author_id} rolled back at {state.value}",
                extra={
                    "author_id": author_id, "outcome": "failed",
                    "error_code": e.code,
                },
                exc_info=True,
            )
            return DeletionResult(
                DeletionOutcome.FAILED, author_id, state, reason=e.message,
            )

        logger.info(
            f"Author {author_id} deleted with {len(plan.recipe_ids)} recipe(s) "
            f"and {len(plan.ingredient_ids)} ingredient(s)",
            extra={"author_id": author_id, "outcome": "deleted"},
        )
        return DeletionResult(
            DeletionOutcome.DELETED, author_id, DeletionState.COMMITTED,
            recipes_deleted=len(plan.recipe_ids),
            ingredients_deleted=len(plan.ingredient_ids),
        )

    async def _resolve_cascade(self, author_id: AuthorId) -> CascadePlan:
        owned = []
        for recipe in await self.store.recipes.find_by_author_id(author_id):
            ingredients = await self.store.ingredients.find_by_recipe_id(recipe.id)
            owned.append((recipe.id, [i.id for i in ingredients]))
        return plan_author_cascade(author_id, owned)

    async def _execute(self, plan: CascadePlan) -> None:
        repositories = {
            EntityKind.INGREDIENT: self.store.ingredients,
            EntityKind.RECIPE: self.store.recipes,
            EntityKind.AUTHOR: self.store.authors,
        }
        for kind, entity_id in plan.deletion_steps():
            await repositories[kind].delete_by_id(entity_id)

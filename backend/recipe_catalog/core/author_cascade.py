"""Author Cascade Plan — which rows an author deletion removes, and in what order.

Invariants:
    - Pure: built from ids the shell has already read, no IO
    - Deletion order is children before parents: ingredients, recipes, author
    - Every recipe owned by the author appears once; every ingredient of those recipes once
    - An author with no recipes yields a single step (the author)

Design Decisions:
    - Plan separated from execution: the shell runs the steps inside one
      transaction, the plan itself is trivially testable
"""

from dataclasses import dataclass
from typing import Iterable
from uuid import UUID

from recipe_catalog.core.domain_types import (
    AuthorId, RecipeId, IngredientId, EntityKind,
)


@dataclass(frozen=True)
class CascadePlan:
    """Rows owned (transitively) by one author."""
    author_id: AuthorId
    recipe_ids: tuple[RecipeId, ...] = ()
    ingredient_ids: tuple[IngredientId, ...] = ()

    def deletion_steps(self) -> list[tuple[EntityKind, UUID]]:
        """Ordered (kind, id) pairs; executing them in order never violates an FK."""
        steps: list[tuple[EntityKind, UUID]] = [
            (EntityKind.INGREDIENT, i) for i in self.ingredient_ids
        ]
        steps.extend((EntityKind.RECIPE, r) for r in self.recipe_ids)
        steps.append((EntityKind.AUTHOR, self.author_id))
        return steps


def plan_author_cascade(
    author_id: AuthorId,
    owned: Iterable[tuple[RecipeId, Iterable[IngredientId]]],
) -> CascadePlan:
    """Build the plan from (recipe_id, ingredient_ids) pairs owned by the author."""
    recipe_ids: list[RecipeId] = []
    ingredient_ids: list[IngredientId] = []
    for recipe_id, ingredients in owned:
        if recipe_id in recipe_ids:
            continue
        recipe_ids.append(recipe_id)
        for ingredient_id in ingredients:
            if ingredient_id not in ingredient_ids:
                ingredient_ids.append(ingredient_id)
    return CascadePlan(
        author_id=author_id,
        recipe_ids=tuple(recipe_ids),
        ingredient_ids=tuple(ingredient_ids),
    )

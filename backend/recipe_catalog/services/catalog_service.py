"""Catalog Writes — create/update/delete for authors, recipes and ingredients.

Invariants:
    - Every write runs inside store.transaction() (commit or rollback, never half)
    - Recipe.author_id, when set, references an existing author (checked before save)
    - Ingredient.recipe_id references an existing recipe (path id, checked before save)
    - Ingredient quantity validated before the store is touched, on create AND update
    - Deleting a recipe deletes its ingredients first; deleting an ingredient is a leaf
    - Author deletion is NOT here: it goes through AuthorCascadeDeletion

Design Decisions:
    - Missing path entities raise ResourceNotFoundError (404); missing body
      references raise InvalidReferenceError (400): the client fixes different things
    - An ingredient addressed under the wrong recipe is "not found"
"""

import logging
from uuid import UUID

from recipe_catalog.core.errors import InvalidReferenceError, ResourceNotFoundError
from recipe_catalog.core.repository_protocols import CatalogStore
from recipe_catalog.core.validate_quantity import enforce_quantity
from recipe_catalog.models.author import Author
from recipe_catalog.models.ingredient import Ingredient
from recipe_catalog.models.recipe import Recipe

logger = logging.getLogger(__name__)


class CatalogService:
    """Invariant-checking writes over a CatalogStore."""

    def __init__(self, store: CatalogStore):
        self.store = store

    # ─── Authors ─────────────────────────────────────────────────

    async def create_author(self, name: str) -> Author:
        async with self.store.transaction():
            author = await self.store.authors.save(Author(name=name))
        logger.info("Author created", extra={"author_id": author.id})
        return author

    async def update_author(self, author_id: UUID, name: str) -> Author:
        async with self.store.transaction():
            author = await self._require_author(author_id)
            author.name = name
            await self.store.authors.save(author)
        return author

    # ─── Recipes ─────────────────────────────────────────────────

    async def create_recipe(
        self,
        title: str,
        description: str | None = None,
        instructions: str | None = None,
        author_id: UUID | None = None,
    ) -> Recipe:
        async with self.store.transaction():
            await self._check_author_reference(author_id)
            recipe = await self.store.recipes.save(Recipe(
                title=title, description=description,
                instructions=instructions, author_id=author_id,
            ))
        logger.info(
            "Recipe created",
            extra={"recipe_id": recipe.id, "author_id": author_id},
        )
        return recipe

    async def update_recipe(
        self,
        recipe_id: UUID,
        title: str,
        description: str | None = None,
        instructions: str | None = None,
        author_id: UUID | None = None,
    ) -> Recipe:
        async with self.store.transaction():
            recipe = await self._require_recipe(recipe_id)
            await self._check_author_reference(author_id)
            recipe.title = title
            recipe.description = description
            recipe.instructions = instructions
            recipe.author_id = author_id
            await self.store.recipes.save(recipe)
        return recipe

    async def delete_recipe(self, recipe_id: UUID) -> None:
        async with self.store.transaction():
            await self._require_recipe(recipe_id)
            for ingredient in await self.store.ingredients.find_by_recipe_id(recipe_id):
                await self.store.ingredients.delete_by_id(ingredient.id)
            await self.store.recipes.delete_by_id(recipe_id)
        logger.info("Recipe deleted", extra={"recipe_id": recipe_id})

    # ─── Ingredients ─────────────────────────────────────────────

    async def create_ingredient(
        self, recipe_id: UUID, name: str, quantity: float, unit: str | None = None,
    ) -> Ingredient:
        enforce_quantity(quantity)
        async with self.store.transaction():
            await self._require_recipe(recipe_id)
            ingredient = await self.store.ingredients.save(Ingredient(
                recipe_id=recipe_id, name=name, quantity=quantity, unit=unit,
            ))
        logger.info(
            "Ingredient created",
            extra={"recipe_id": recipe_id, "ingredient_id": ingredient.id},
        )
        return ingredient

    async def update_ingredient(
        self,
        recipe_id: UUID,
        ingredient_id: UUID,
        name: str,
        quantity: float,
        unit: str | None = None,
    ) -> Ingredient:
        enforce_quantity(quantity)
        async with self.store.transaction():
            ingredient = await self._require_ingredient(recipe_id, ingredient_id)
            ingredient.name = name
            ingredient.quantity = quantity
            ingredient.unit = unit
            await self.store.ingredients.save(ingredient)
        return ingredient

    async def delete_ingredient(self, recipe_id: UUID, ingredient_id: UUID) -> None:
        async with self.store.transaction():
            await self._require_ingredient(recipe_id, ingredient_id)
            await self.store.ingredients.delete_by_id(ingredient_id)

    # ─── Lookups ─────────────────────────────────────────────────

    async def _require_author(self, author_id: UUID) -> Author:
        author = await self.store.authors.get(author_id)
        if author is None:
            raise ResourceNotFoundError("Author", str(author_id))
        return author

    async def _require_recipe(self, recipe_id: UUID) -> Recipe:
        recipe = await self.store.recipes.get(recipe_id)
        if recipe is None:
            raise ResourceNotFoundError("Recipe", str(recipe_id))
        return recipe

    async def _require_ingredient(
        self, recipe_id: UUID, ingredient_id: UUID,
    ) -> Ingredient:
        await self._require_recipe(recipe_id)
        ingredient = await self.store.ingredients.get(ingredient_id)
        if ingredient is None or ingredient.recipe_id != recipe_id:
            raise ResourceNotFoundError("Ingredient", str(ingredient_id))
        return ingredient

    async def _check_author_reference(self, author_id: UUID | None) -> None:
        if author_id is not None and not await self.store.authors.exists(author_id):
            raise InvalidReferenceError("Author", str(author_id), "author_id")

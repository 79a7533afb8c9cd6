"""Boundary Protocols — the Entity Store contract consumed by the core.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - CatalogStore.transaction() releases (commit or rollback) on every exit path

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves
    - Entity shapes as *Like protocols: services stay decoupled from the ORM models
"""

from typing import AsyncContextManager, Protocol, Sequence
from uuid import UUID

from recipe_catalog.core.domain_types import AuthorId, RecipeId, IngredientId
from recipe_catalog.core.search_compiler import SearchQuery


class AuthorLike(Protocol):
    """Structural contract for Author entities."""
    id: UUID
    name: str


class RecipeLike(Protocol):
    """Structural contract for Recipe entities."""
    id: UUID
    title: str
    description: str | None
    instructions: str | None
    author_id: UUID | None


class IngredientLike(Protocol):
    """Structural contract for Ingredient entities."""
    id: UUID
    name: str
    quantity: float
    unit: str | None
    recipe_id: UUID


class AuthorRepository(Protocol):
    """Contract for author persistence — implemented by shell."""
    async def get(self, author_id: AuthorId) -> AuthorLike | None: ...
    async def get_for_update(self, author_id: AuthorId) -> AuthorLike | None: ...
    async def exists(self, author_id: AuthorId) -> bool: ...
    async def save(self, author: AuthorLike) -> AuthorLike: ...
    async def delete_by_id(self, author_id: AuthorId) -> None: ...
    async def find_all(self) -> Sequence[AuthorLike]: ...


class RecipeRepository(Protocol):
    """Contract for recipe persistence — implemented by shell."""
    async def get(self, recipe_id: RecipeId) -> RecipeLike | None: ...
    async def exists(self, recipe_id: RecipeId) -> bool: ...
    async def save(self, recipe: RecipeLike) -> RecipeLike: ...
    async def delete_by_id(self, recipe_id: RecipeId) -> None: ...
    async def find_all(self) -> Sequence[RecipeLike]: ...
    async def find_by_author_id(self, author_id: AuthorId) -> Sequence[RecipeLike]: ...
    async def search(self, query: SearchQuery) -> Sequence[RecipeLike]: ...


class IngredientRepository(Protocol):
    """Contract for ingredient persistence — implemented by shell."""
    async def get(self, ingredient_id: IngredientId) -> IngredientLike | None: ...
    async def exists(self, ingredient_id: IngredientId) -> bool: ...
    async def save(self, ingredient: IngredientLike) -> IngredientLike: ...
    async def delete_by_id(self, ingredient_id: IngredientId) -> None: ...
    async def find_all(self) -> Sequence[IngredientLike]: ...
    async def find_by_recipe_id(self, recipe_id: RecipeId) -> Sequence[IngredientLike]: ...


class CatalogStore(Protocol):
    """The three repositories plus one atomic transaction boundary spanning them."""
    authors: AuthorRepository
    recipes: RecipeRepository
    ingredients: IngredientRepository

    def transaction(self) -> AsyncContextManager[None]: ...

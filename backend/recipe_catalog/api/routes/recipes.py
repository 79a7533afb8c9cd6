"""Recipe Routes — CRUD and keyword search for recipes.

Invariants:
    - GET /recipes/search always returns 200 with a list; no usable keywords → []
    - /search registered before /{recipe_id} so it is never parsed as an id
    - DELETE /recipes/{id} removes the recipe's ingredients with it
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from recipe_catalog.api.dependencies import get_app_settings, get_store
from recipe_catalog.config import Settings
from recipe_catalog.core.errors import ResourceNotFoundError
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyCatalogStore
from recipe_catalog.schemas.recipe import RecipeCreate, RecipeResponse
from recipe_catalog.services.catalog_service import CatalogService
from recipe_catalog.services.recipe_search import search_recipes

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(store: SqlAlchemyCatalogStore = Depends(get_store)):
    """List all recipes."""
    return await store.recipes.find_all()


@router.get("/search", response_model=list[RecipeResponse])
async def search(
    keywords: list[str] | None = Query(None),
    store: SqlAlchemyCatalogStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Recipes matching every keyword in title, description, instructions,
    author name or an ingredient name (case-insensitive substring)."""
    return await search_recipes(
        store, keywords, max_keywords=settings.search_max_keywords,
    )


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: UUID, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Get one recipe."""
    recipe = await store.recipes.get(recipe_id)
    if recipe is None:
        raise ResourceNotFoundError("Recipe", str(recipe_id))
    return recipe


@router.post(
    "", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    body: RecipeCreate, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Create a recipe, optionally linked to an existing author."""
    return await CatalogService(store).create_recipe(
        body.title, body.description, body.instructions, body.author_id,
    )


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: UUID,
    body: RecipeCreate,
    store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Replace a recipe's fields, including its author reference."""
    return await CatalogService(store).update_recipe(
        recipe_id, body.title, body.description, body.instructions,
        body.author_id,
    )


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: UUID, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Delete a recipe and its ingredients."""
    await CatalogService(store).delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

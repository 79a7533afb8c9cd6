"""Ingredient Routes — CRUD for the ingredients of one recipe.

Invariants:
    - Every route 404s when the recipe in the path does not exist
    - Negative quantity → 400 on create and on update, nothing persisted
    - An ingredient is only reachable under the recipe that owns it
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from recipe_catalog.api.dependencies import get_store
from recipe_catalog.core.errors import ResourceNotFoundError
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyCatalogStore
from recipe_catalog.schemas.ingredient import IngredientCreate, IngredientResponse
from recipe_catalog.services.catalog_service import CatalogService

router = APIRouter(
    prefix="/api/v1/recipes/{recipe_id}/ingredients", tags=["ingredients"],
)


@router.get("", response_model=list[IngredientResponse])
async def list_ingredients(
    recipe_id: UUID, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """List the ingredients of a recipe."""
    if not await store.recipes.exists(recipe_id):
        raise ResourceNotFoundError("Recipe", str(recipe_id))
    return await store.ingredients.find_by_recipe_id(recipe_id)


@router.post(
    "", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED,
)
async def create_ingredient(
    recipe_id: UUID,
    body: IngredientCreate,
    store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Add an ingredient to a recipe."""
    return await CatalogService(store).create_ingredient(
        recipe_id, body.name, body.quantity, body.unit,
    )


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    recipe_id: UUID,
    ingredient_id: UUID,
    body: IngredientCreate,
    store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Replace an ingredient's name, quantity and unit."""
    return await CatalogService(store).update_ingredient(
        recipe_id, ingredient_id, body.name, body.quantity, body.unit,
    )


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
    recipe_id: UUID,
    ingredient_id: UUID,
    store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Remove one ingredient from a recipe."""
    await CatalogService(store).delete_ingredient(recipe_id, ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

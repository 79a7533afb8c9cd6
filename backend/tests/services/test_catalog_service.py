"""Catalog Service tests — invariant-checking writes over the SQL store.

Tests cover:
    - Recipe author reference must exist (400 INVALID_REFERENCE), None allowed
    - Ingredient writes require an existing recipe (404)
    - Negative quantity rejected on create and update; nothing persisted
    - Zero quantity accepted
    - Ingredient addressed under another recipe → 404
    - Recipe delete removes its ingredients
    - ORM-level quantity guard for writes that bypass the service
"""

from uuid import uuid4

import pytest

from recipe_catalog.core.errors import (
    InvalidReferenceError, QuantityValidationError, ResourceNotFoundError,
)
from recipe_catalog.models.ingredient import Ingredient
from recipe_catalog.services.catalog_service import CatalogService


@pytest.fixture
def service(store):
    return CatalogService(store)


async def test_create_recipe_with_existing_author(service, fresh_store, seed_catalog):
    recipe = await service.create_recipe(
        "Shepherd's Pie", author_id=seed_catalog["author_id"],
    )

    loaded = await fresh_store.recipes.get(recipe.id)
    assert loaded.author_id == seed_catalog["author_id"]


async def test_create_recipe_without_author(service):
    recipe = await service.create_recipe("Plain Toast")
    assert recipe.author_id is None


async def test_create_recipe_with_unknown_author_rejected(service, fresh_store):
    with pytest.raises(InvalidReferenceError) as exc_info:
        await service.create_recipe("Mystery Stew", author_id=uuid4())

    assert exc_info.value.http_status == 400
    assert await fresh_store.recipes.find_all() == []


async def test_update_recipe_to_unknown_author_rejected(service, fresh_store, seed_catalog):
    with pytest.raises(InvalidReferenceError):
        await service.update_recipe(
            seed_catalog["recipe_id"], "Beef Wellington", author_id=uuid4(),
        )

    loaded = await fresh_store.recipes.get(seed_catalog["recipe_id"])
    assert loaded.author_id == seed_catalog["author_id"]


async def test_update_missing_author_is_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.update_author(uuid4(), "Nobody")


async def test_create_ingredient_for_missing_recipe(service):
    with pytest.raises(ResourceNotFoundError):
        await service.create_ingredient(uuid4(), "Salt", 1.0)


async def test_negative_quantity_rejected_on_create(service, fresh_store, seed_catalog):
    with pytest.raises(QuantityValidationError):
        await service.create_ingredient(seed_catalog["recipe_id"], "Salt", -5.0)

    ingredients = await fresh_store.ingredients.find_by_recipe_id(seed_catalog["recipe_id"])
    assert [i.name for i in ingredients] == ["Mushroom Duxelles"]


async def test_negative_quantity_rejected_on_update(service, fresh_store, seed_catalog):
    with pytest.raises(QuantityValidationError):
        await service.update_ingredient(
            seed_catalog["recipe_id"], seed_catalog["ingredient_id"],
            "Mushroom Duxelles", -1.0,
        )

    loaded = await fresh_store.ingredients.get(seed_catalog["ingredient_id"])
    assert loaded.quantity == 200.0


async def test_zero_quantity_accepted(service, seed_catalog):
    ingredient = await service.create_ingredient(
        seed_catalog["recipe_id"], "Pinch of Salt", 0.0,
    )
    assert ingredient.quantity == 0.0


async def test_ingredient_under_wrong_recipe_is_not_found(service, seed_catalog):
    other = await service.create_recipe("Plain Toast")

    with pytest.raises(ResourceNotFoundError):
        await service.delete_ingredient(other.id, seed_catalog["ingredient_id"])


async def test_delete_recipe_removes_ingredients(service, fresh_store, seed_catalog):
    await service.delete_recipe(seed_catalog["recipe_id"])

    assert await fresh_store.recipes.get(seed_catalog["recipe_id"]) is None
    assert await fresh_store.ingredients.get(seed_catalog["ingredient_id"]) is None
    assert await fresh_store.authors.exists(seed_catalog["author_id"])


def test_orm_rejects_negative_quantity():
    with pytest.raises(QuantityValidationError):
        Ingredient(recipe_id=uuid4(), name="Salt", quantity=-0.5)


def test_orm_rejects_infinite_quantity():
    with pytest.raises(QuantityValidationError):
        Ingredient(recipe_id=uuid4(), name="Salt", quantity=float("inf"))

"""IngredientCreate schema — quantity and name validation at the API edge."""

import pytest
from pydantic import ValidationError

from recipe_catalog.schemas.ingredient import IngredientCreate
from recipe_catalog.schemas.recipe import RecipeCreate


def test_zero_quantity_valid():
    assert IngredientCreate(name="Salt", quantity=0).quantity == 0.0


def test_negative_quantity_invalid():
    with pytest.raises(ValidationError, match="non-negative"):
        IngredientCreate(name="Salt", quantity=-5.0)


def test_name_is_stripped():
    assert IngredientCreate(name="  Salt ", quantity=1).name == "Salt"


def test_whitespace_name_invalid():
    with pytest.raises(ValidationError):
        IngredientCreate(name="   ", quantity=1)


def test_recipe_description_length_limit():
    with pytest.raises(ValidationError):
        RecipeCreate(title="Long", description="x" * 1001)


def test_infinite_quantity_invalid():
    with pytest.raises(ValidationError, match="finite"):
        IngredientCreate(name="Salt", quantity=float("inf"))

"""Author Cascade Deletion tests — atomic author → recipes → ingredients removal.

Tests cover:
    - Full cascade: author, its recipes and their ingredients all gone
    - Delete order: ingredients before recipes before the author
    - Absent author → NOT_FOUND, no writes; repeated delete → NOT_FOUND again
    - Mid-cascade failure → FAILED, every row still present (rollback)
    - Other authors' data untouched
    - SQL store: same guarantees against SQLite with foreign keys enforced
    - Raw author delete with recipes still referencing it is refused by the DB

Design Decisions:
    - FakeCatalogStore for ordering/rollback logic, SQLite store for real FK behavior
"""

from uuid import uuid4

import pytest
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, OperationalError

from recipe_catalog.core.domain_types import DeletionOutcome, DeletionState, EntityKind
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyRecipeRepository
from recipe_catalog.models.author import Author
from recipe_catalog.models.ingredient import Ingredient
from recipe_catalog.models.recipe import Recipe
from recipe_catalog.services.author_deletion import AuthorCascadeDeletion

from tests.services.fake_store import FakeCatalogStore


@pytest.fixture
def fake():
    store = FakeCatalogStore()
    gordon = store.add_author("Gordon Ramsay")
    wellington = store.add_recipe("Beef Wellington", gordon)
    store.add_ingredient(wellington, "Mushroom Duxelles", 200.0)
    store.add_ingredient(wellington, "Puff Pastry", 1.0)
    pie = store.add_recipe("Shepherd's Pie", gordon)
    store.add_ingredient(pie, "Lamb Mince", 500.0)
    store.gordon = gordon
    return store


# ─── Fake store: cascade logic ───────────────────────────────────

async def test_cascade_deletes_author_recipes_and_ingredients(fake):
    result = await AuthorCascadeDeletion(fake).delete_author_cascade(fake.gordon.id)

    assert result.outcome is DeletionOutcome.DELETED
    assert result.state is DeletionState.COMMITTED
    assert result.recipes_deleted == 2
    assert result.ingredients_deleted == 3
    assert fake.tables[EntityKind.AUTHOR] == {}
    assert fake.tables[EntityKind.RECIPE] == {}
    assert fake.tables[EntityKind.INGREDIENT] == {}
    assert fake.commits == 1


async def test_children_deleted_before_parents(fake):
    await AuthorCascadeDeletion(fake).delete_author_cascade(fake.gordon.id)

    kinds = [kind for kind, _ in fake.deleted]
    last_ingredient = max(i for i, k in enumerate(kinds) if k is EntityKind.INGREDIENT)
    first_recipe = kinds.index(EntityKind.RECIPE)
    assert last_ingredient < first_recipe
    assert kinds[-1] is EntityKind.AUTHOR


async def test_missing_author_is_not_found_without_writes(fake):
    result = await AuthorCascadeDeletion(fake).delete_author_cascade(uuid4())

    assert result.outcome is DeletionOutcome.NOT_FOUND
    assert result.state is DeletionState.REJECTED
    assert fake.deleted == []
    assert len(fake.tables[EntityKind.RECIPE]) == 2


async def test_repeated_delete_is_not_found(fake):
    engine = AuthorCascadeDeletion(fake)
    first = await engine.delete_author_cascade(fake.gordon.id)
    second = await engine.delete_author_cascade(fake.gordon.id)

    assert first.outcome is DeletionOutcome.DELETED
    assert second.outcome is DeletionOutcome.NOT_FOUND


async def test_failure_mid_cascade_rolls_back_everything(fake):
    fake.fail_on_delete = EntityKind.RECIPE

    result = await AuthorCascadeDeletion(fake).delete_author_cascade(fake.gordon.id)

    assert result.outcome is DeletionOutcome.FAILED
    assert result.state is DeletionState.CASCADE_RESOLVED
    assert result.reason
    assert fake.rollbacks == 1
    assert fake.deleted == []
    assert fake.gordon.id in fake.tables[EntityKind.AUTHOR]
    assert len(fake.tables[EntityKind.RECIPE]) == 2
    assert len(fake.tables[EntityKind.INGREDIENT]) == 3


async def test_failure_on_last_step_rolls_back_children(fake):
    fake.fail_on_delete = EntityKind.AUTHOR

    result = await AuthorCascadeDeletion(fake).delete_author_cascade(fake.gordon.id)

    assert result.outcome is DeletionOutcome.FAILED
    assert len(fake.tables[EntityKind.INGREDIENT]) == 3


async def test_other_authors_untouched(fake):
    julia = fake.add_author("Julia Child")
    bourguignon = fake.add_recipe("Boeuf Bourguignon", julia)
    fake.add_ingredient(bourguignon, "Red Wine", 750.0)

    await AuthorCascadeDeletion(fake).delete_author_cascade(fake.gordon.id)

    assert list(fake.tables[EntityKind.AUTHOR]) == [julia.id]
    assert list(fake.tables[EntityKind.RECIPE]) == [bourguignon.id]
    assert len(fake.tables[EntityKind.INGREDIENT]) == 1


async def test_author_without_recipes_is_deleted(fake):
    solo = fake.add_author("Solo Cook")

    result = await AuthorCascadeDeletion(fake).delete_author_cascade(solo.id)

    assert result.outcome is DeletionOutcome.DELETED
    assert result.recipes_deleted == 0
    assert fake.deleted == [(EntityKind.AUTHOR, solo.id)]


# ─── SQL store: real foreign keys ────────────────────────────────

async def test_sql_cascade_removes_whole_graph(store, fresh_store, seed_catalog):
    result = await AuthorCascadeDeletion(store).delete_author_cascade(
        seed_catalog["author_id"],
    )

    assert result.outcome is DeletionOutcome.DELETED
    assert await fresh_store.authors.get(seed_catalog["author_id"]) is None
    assert await fresh_store.recipes.get(seed_catalog["recipe_id"]) is None
    assert await fresh_store.ingredients.get(seed_catalog["ingredient_id"]) is None


async def test_sql_repeated_delete_is_not_found(store, seed_catalog):
    engine = AuthorCascadeDeletion(store)
    await engine.delete_author_cascade(seed_catalog["author_id"])

    result = await engine.delete_author_cascade(seed_catalog["author_id"])

    assert result.outcome is DeletionOutcome.NOT_FOUND


async def test_sql_failure_rolls_back_ingredient_deletes(
    store, fresh_store, seed_catalog, monkeypatch,
):
    async def failing_delete(self, entity_id):
        raise OperationalError("DELETE FROM recipes", {}, Exception("disk I/O error"))

    monkeypatch.setattr(SqlAlchemyRecipeRepository, "delete_by_id", failing_delete)

    result = await AuthorCascadeDeletion(store).delete_author_cascade(
        seed_catalog["author_id"],
    )

    assert result.outcome is DeletionOutcome.FAILED
    assert "disk I/O error" not in result.reason
    assert await fresh_store.authors.get(seed_catalog["author_id"]) is not None
    assert await fresh_store.recipes.get(seed_catalog["recipe_id"]) is not None
    assert await fresh_store.ingredients.get(seed_catalog["ingredient_id"]) is not None


async def test_raw_author_delete_with_recipes_violates_foreign_key(test_db, seed_catalog):
    with pytest.raises(IntegrityError):
        await test_db.execute(
            delete(Author).where(Author.id == seed_catalog["author_id"]),
        )
    await test_db.rollback()

    result = await test_db.execute(
        select(Recipe.id).where(Recipe.author_id == seed_catalog["author_id"]),
    )
    assert result.scalar_one_or_none() == seed_catalog["recipe_id"]


async def test_sql_recipe_delete_cascades_ingredients_in_db(test_db, seed_catalog):
    await test_db.execute(
        delete(Recipe).where(Recipe.id == seed_catalog["recipe_id"]),
    )
    await test_db.commit()

    result = await test_db.execute(
        select(Ingredient.id).where(Ingredient.id == seed_catalog["ingredient_id"]),
    )
    assert result.scalar_one_or_none() is None

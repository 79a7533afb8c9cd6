"""Author Cascade Plan tests — contents and order of the deletion steps.

Tests cover:
    - Author without recipes → single author step
    - Ingredients, then recipes, then the author
    - Repeated recipe/ingredient ids collapsed
"""

from uuid import uuid4

from recipe_catalog.core.author_cascade import plan_author_cascade
from recipe_catalog.core.domain_types import EntityKind


def test_author_without_recipes_deletes_only_the_author():
    author_id = uuid4()
    plan = plan_author_cascade(author_id, [])
    assert plan.deletion_steps() == [(EntityKind.AUTHOR, author_id)]


def test_steps_delete_children_before_parents():
    author_id, r1, r2, i1, i2, i3 = (uuid4() for _ in range(6))
    plan = plan_author_cascade(author_id, [(r1, [i1, i2]), (r2, [i3])])

    steps = plan.deletion_steps()
    kinds = [kind for kind, _ in steps]
    assert kinds == [
        EntityKind.INGREDIENT, EntityKind.INGREDIENT, EntityKind.INGREDIENT,
        EntityKind.RECIPE, EntityKind.RECIPE,
        EntityKind.AUTHOR,
    ]
    assert steps[-1] == (EntityKind.AUTHOR, author_id)
    assert plan.recipe_ids == (r1, r2)
    assert plan.ingredient_ids == (i1, i2, i3)


def test_duplicate_ids_are_collapsed():
    author_id, r1, i1 = uuid4(), uuid4(), uuid4()
    plan = plan_author_cascade(author_id, [(r1, [i1, i1]), (r1, [i1])])
    assert plan.recipe_ids == (r1,)
    assert plan.ingredient_ids == (i1,)

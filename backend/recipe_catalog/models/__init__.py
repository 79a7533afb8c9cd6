"""ORM Models — SQLAlchemy declarative models for authors, recipes and ingredients.

Invariants:
    - All models inherit from Base (db/base.py)
    - Ingredient belongs to exactly one Recipe; Recipe optionally references one Author

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from recipe_catalog.models.author import Author  # noqa: F401
from recipe_catalog.models.recipe import Recipe  # noqa: F401
from recipe_catalog.models.ingredient import Ingredient  # noqa: F401

"""Recipe Search — runs the compiled keyword tree against the catalog store.

Invariants:
    - Read-only: never opens a write transaction
    - No usable keywords → [] without touching the store (default-deny)
    - More distinct keywords than max_keywords → [] without touching the store;
      a keyword is never silently dropped, so the AND over keywords always holds
    - Result is free of duplicates, in store order
"""

import logging
from typing import Iterable

from recipe_catalog.core.repository_protocols import CatalogStore, RecipeLike
from recipe_catalog.core.search_compiler import (
    DEFAULT_MAX_KEYWORDS, compile_search, unique_by_id,
)

logger = logging.getLogger(__name__)


async def search_recipes(
    store: CatalogStore,
    keywords: Iterable[str | None] | None,
    max_keywords: int = DEFAULT_MAX_KEYWORDS,
) -> list[RecipeLike]:
    """Return every recipe matching all keywords, each at most once."""
    query = compile_search(keywords)
    if query is None:
        logger.debug("Recipe search skipped: no usable keywords")
        return []
    if len(query.clauses) > max_keywords:
        logger.warning(
            f"Recipe search refused: {len(query.clauses)} keywords "
            f"exceed the limit of {max_keywords}",
            extra={"keyword_count": len(query.clauses)},
        )
        return []

    recipes = unique_by_id(await store.recipes.search(query))
    logger.debug(
        "Recipe search completed",
        extra={"keyword_count": len(query.clauses), "result_count": len(recipes)},
    )
    return recipes

"""SQL Catalog Store — SQLAlchemy implementation of the Entity Store contract.

Invariants:
    - One AsyncSession per store; all three repositories share it
    - transaction() commits on clean exit, rolls back on ANY exception
    - SQLAlchemy exceptions leave transaction() only as DatabaseError
    - search() runs one parameterized statement; results unique by recipe id

Design Decisions:
    - Author name via LEFT OUTER JOIN (many-to-one: never multiplies rows)
    - Ingredient names via correlated EXISTS per keyword: same keep-the-recipe
      semantics as a left join, without one row per ingredient per keyword
    - LIKE wildcards in keywords escaped: "50%" matches a literal percent sign
    - get_for_update uses SELECT ... FOR UPDATE (SQLite ignores it) so two
      cascades on one author serialize on PostgreSQL
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from recipe_catalog.core.domain_types import SearchField
from recipe_catalog.infrastructure.database import to_database_error
from recipe_catalog.core.search_compiler import (
    AnyFieldMatch, FieldMatch, SearchQuery, unique_by_id,
)
from recipe_catalog.models.author import Author
from recipe_catalog.models.ingredient import Ingredient
from recipe_catalog.models.recipe import Recipe

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _like_pattern(needle: str) -> str:
    escaped = (
        needle.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _contains(column, needle: str):
    return func.lower(column).like(_like_pattern(needle), escape=_LIKE_ESCAPE)


def _field_condition(match: FieldMatch, author):
    """Translate one leaf of the search tree to a SQL boolean expression."""
    if match.field is SearchField.TITLE:
        return _contains(Recipe.title, match.needle)
    if match.field is SearchField.DESCRIPTION:
        return _contains(Recipe.description, match.needle)
    if match.field is SearchField.INSTRUCTIONS:
        return _contains(Recipe.instructions, match.needle)
    if match.field is SearchField.AUTHOR_NAME:
        return _contains(author.name, match.needle)
    if match.field is SearchField.INGREDIENT_NAME:
        return Recipe.ingredients.any(_contains(Ingredient.name, match.needle))
    raise ValueError(f"Unsupported search field: {match.field}")


def _clause_condition(clause: AnyFieldMatch, author):
    return or_(*(_field_condition(m, author) for m in clause.matches))


def build_search_statement(query: SearchQuery):
    """Compile a SearchQuery into a SELECT over recipes."""
    author = aliased(Author)
    return (
        select(Recipe)
        .outerjoin(author, Recipe.author_id == author.id)
        .where(and_(*(_clause_condition(c, author) for c in query.clauses)))
        .order_by(Recipe.created_at, Recipe.id)
    )


class _SqlAlchemyRepository:
    """Shared get/exists/save/delete/find_all for one mapped model."""
    model: type

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, entity_id: UUID):
        result = await self.session.execute(
            select(self.model).where(self.model.id == entity_id),
        )
        return result.scalar_one_or_none()

    async def exists(self, entity_id: UUID) -> bool:
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == entity_id).limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def save(self, entity):
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete_by_id(self, entity_id: UUID) -> None:
        await self.session.execute(
            delete(self.model).where(self.model.id == entity_id),
        )

    async def find_all(self) -> Sequence:
        result = await self.session.execute(
            select(self.model).order_by(self.model.created_at, self.model.id),
        )
        return result.scalars().all()


class SqlAlchemyAuthorRepository(_SqlAlchemyRepository):
    model = Author

    async def get_for_update(self, author_id: UUID) -> Author | None:
        result = await self.session.execute(
            select(Author).where(Author.id == author_id).with_for_update(),
        )
        return result.scalar_one_or_none()


class SqlAlchemyRecipeRepository(_SqlAlchemyRepository):
    model = Recipe

    async def find_by_author_id(self, author_id: UUID) -> Sequence[Recipe]:
        result = await self.session.execute(
            select(Recipe)
            .where(Recipe.author_id == author_id)
            .order_by(Recipe.created_at, Recipe.id),
        )
        return result.scalars().all()

    async def search(self, query: SearchQuery) -> list[Recipe]:
        result = await self.session.execute(build_search_statement(query))
        return unique_by_id(result.scalars().all())


class SqlAlchemyIngredientRepository(_SqlAlchemyRepository):
    model = Ingredient

    async def find_by_recipe_id(self, recipe_id: UUID) -> Sequence[Ingredient]:
        result = await self.session.execute(
            select(Ingredient)
            .where(Ingredient.recipe_id == recipe_id)
            .order_by(Ingredient.created_at, Ingredient.id),
        )
        return result.scalars().all()


class SqlAlchemyCatalogStore:
    """CatalogStore over one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.authors = SqlAlchemyAuthorRepository(session)
        self.recipes = SqlAlchemyRecipeRepository(session)
        self.ingredients = SqlAlchemyIngredientRepository(session)

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[None, None]:
        """Commit on clean exit; roll back and re-raise on any exception."""
        try:
            yield
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Transaction rolled back: {e}")
            raise to_database_error(e) from e
        except Exception:
            await self.session.rollback()
            raise

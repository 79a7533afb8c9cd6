"""Service test fixtures — async DB, SQL catalog store, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB session
    - seed_catalog inserts the Gordon Ramsay / Beef Wellington / Mushroom Duxelles graph

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for store and route tests
    - Engine built through db.session.create_engine so the FK pragma matches production
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from httpx import ASGITransport, AsyncClient

from recipe_catalog.db.base import Base
from recipe_catalog.db.session import create_engine, create_session_factory
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyCatalogStore
from recipe_catalog.infrastructure.database import get_db
from recipe_catalog.models.author import Author
from recipe_catalog.models.ingredient import Ingredient
from recipe_catalog.models.recipe import Recipe
from recipe_catalog.main import app


@pytest.fixture
async def test_engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def store(test_session_factory):
    """SQL catalog store over its own session (separate from test_db)."""
    async with test_session_factory() as session:
        yield SqlAlchemyCatalogStore(session)


@pytest.fixture
async def fresh_store(test_session_factory):
    """Second store for read-after-write assertions with an empty identity map."""
    async with test_session_factory() as session:
        yield SqlAlchemyCatalogStore(session)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_catalog(test_db: AsyncSession):
    """Insert one author → one recipe → one ingredient; return their ids."""
    author = Author(name="Gordon Ramsay")
    test_db.add(author)
    await test_db.flush()
    recipe = Recipe(
        title="Beef Wellington",
        description="A classic British dish with tender beef",
        instructions="Wrap beef in puff pastry and bake",
        author_id=author.id,
    )
    test_db.add(recipe)
    await test_db.flush()
    ingredient = Ingredient(
        recipe_id=recipe.id, name="Mushroom Duxelles",
        quantity=200.0, unit="grams",
    )
    test_db.add(ingredient)
    await test_db.commit()
    return {
        "author_id": author.id,
        "recipe_id": recipe.id,
        "ingredient_id": ingredient.id,
    }

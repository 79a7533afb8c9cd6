"""Route Dependencies — per-request store and settings.

Invariants:
    - One SqlAlchemyCatalogStore per request, over the request's AsyncSession
    - Settings come from app.state (set by create_app), never re-read per request
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_catalog.config import Settings
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyCatalogStore
from recipe_catalog.infrastructure.database import get_db


async def get_store(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyCatalogStore:
    return SqlAlchemyCatalogStore(db)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

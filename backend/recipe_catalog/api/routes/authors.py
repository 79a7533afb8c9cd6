"""Author Routes — CRUD for authors; DELETE cascades through the integrity engine.

Invariants:
    - DELETE /authors/{id}: 204 when the author and everything it owns is gone,
      404 when the author does not exist (also on repeat), 503 when the cascade rolled back
    - A storage constraint message never reaches the client
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from recipe_catalog.api.dependencies import get_store
from recipe_catalog.core.domain_types import AuthorId, DeletionOutcome
from recipe_catalog.core.errors import (
    DatabaseError, ErrorContext, ResourceNotFoundError,
)
from recipe_catalog.infrastructure.catalog_store import SqlAlchemyCatalogStore
from recipe_catalog.schemas.author import AuthorCreate, AuthorResponse
from recipe_catalog.services.author_deletion import AuthorCascadeDeletion
from recipe_catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/authors", tags=["authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(store: SqlAlchemyCatalogStore = Depends(get_store)):
    """List all authors."""
    return await store.authors.find_all()


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: UUID, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Get one author."""
    author = await store.authors.get(author_id)
    if author is None:
        raise ResourceNotFoundError("Author", str(author_id))
    return author


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorCreate, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Create an author."""
    return await CatalogService(store).create_author(body.name)


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: UUID,
    body: AuthorCreate,
    store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Rename an author."""
    return await CatalogService(store).update_author(author_id, body.name)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: UUID, store: SqlAlchemyCatalogStore = Depends(get_store),
):
    """Delete an author together with its recipes and their ingredients."""
    result = await AuthorCascadeDeletion(store).delete_author_cascade(
        AuthorId(author_id),
    )
    if result.outcome is DeletionOutcome.NOT_FOUND:
        raise ResourceNotFoundError("Author", str(author_id))
    if result.outcome is DeletionOutcome.FAILED:
        raise DatabaseError(
            "author was not deleted, no changes were made", "delete",
            context=ErrorContext(entity_type="Author", entity_id=str(author_id)),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

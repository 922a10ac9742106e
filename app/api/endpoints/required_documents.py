"""Required documents API: list, get, create, update, delete, clone.

GET, PUT and clone on an id with no row answer 404 with an ``error`` body,
not a generic 500. DELETE on such an id still reports success.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import (
    get_required_document_repo,
    get_required_document_repo_for_write,
    require_admin,
)
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.repositories.required_document_repo import (
    RESOURCE_TYPE,
    RequiredDocumentRepository,
)
from app.schemas.common import DeleteResponse
from app.schemas.required_document import (
    RequiredDocumentCreate,
    RequiredDocumentResponse,
    RequiredDocumentUpdate,
)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=list[RequiredDocumentResponse])
async def list_required_documents(
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo)],
):
    """List required documents by sort_order ascending, then id descending."""
    documents = await repo.list_all()
    return [RequiredDocumentResponse.model_validate(d) for d in documents]


@router.post("", response_model=RequiredDocumentResponse)
@limit_writes
async def create_required_document(
    request: Request,
    body: RequiredDocumentCreate,
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo_for_write)],
):
    """Create a required document. id and updated_at are assigned by the store."""
    created = await repo.create_document(body.model_dump(mode="json"))
    return RequiredDocumentResponse.model_validate(created)


@router.get("/{document_id}", response_model=RequiredDocumentResponse)
async def get_required_document(
    document_id: int,
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo)],
):
    """Get a required document by id."""
    document = await repo.get(document_id)
    if document is None:
        raise ResourceNotFoundException(RESOURCE_TYPE, document_id)
    return RequiredDocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=RequiredDocumentResponse)
@limit_writes
async def update_required_document(
    request: Request,
    document_id: int,
    body: RequiredDocumentUpdate,
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo_for_write)],
):
    """Replace only the fields present in the body; updated_at is refreshed."""
    updated = await repo.update_document(document_id, body.changes())
    return RequiredDocumentResponse.model_validate(updated)


@router.delete("/{document_id}", response_model=DeleteResponse)
@limit_writes
async def delete_required_document(
    request: Request,
    document_id: int,
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo_for_write)],
):
    """Delete a required document. Succeeds even when no row has that id."""
    await repo.delete_document(document_id)
    return DeleteResponse()


@router.post("/{document_id}/clone", response_model=RequiredDocumentResponse)
@limit_writes
async def clone_required_document(
    request: Request,
    document_id: int,
    repo: Annotated[RequiredDocumentRepository, Depends(get_required_document_repo_for_write)],
):
    """Insert a copy of a required document with a new id and fresh updated_at."""
    cloned = await repo.clone_document(document_id)
    return RequiredDocumentResponse.model_validate(cloned)

"""Required document repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.required_document import RequiredDocumentResult
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.required_document import RequiredDocument
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.context import get_current_admin
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

RESOURCE_TYPE = "required_document"


def _to_result(d: RequiredDocument) -> RequiredDocumentResult:
    """Map ORM to RequiredDocumentResult."""
    return RequiredDocumentResult(
        id=d.id,
        permit_type=d.permit_type,
        document_name=d.document_name,
        required_for=d.required_for,
        is_mandatory=d.is_mandatory,
        condition=d.condition,
        description=d.description,
        sort_order=d.sort_order,
        is_active=d.is_active,
        updated_at=ensure_utc(d.updated_at),
        validation_rules=d.validation_rules or {},
    )


class RequiredDocumentRepository(BaseRepository[RequiredDocument]):
    """Required document repository (display order: sort_order asc, id desc)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, RequiredDocument)

    async def list_all(self) -> list[RequiredDocumentResult]:
        """Return all required documents in display order."""
        rows = await self.get_all(
            RequiredDocument.sort_order.asc(), RequiredDocument.id.desc()
        )
        return [_to_result(d) for d in rows]

    async def get(self, document_id: int) -> RequiredDocumentResult | None:
        """Return a required document by id, or None."""
        row = await self.get_by_id(document_id)
        return _to_result(row) if row else None

    async def create_document(self, data: dict[str, Any]) -> RequiredDocumentResult:
        """Insert a required document from validated request fields."""
        writable = self.writable_columns()
        row = await self.create(
            RequiredDocument(**{k: v for k, v in data.items() if k in writable})
        )
        logger.info(
            "Created required document %s (%s) by %s",
            row.id,
            row.permit_type,
            get_current_admin(),
        )
        return _to_result(row)

    async def update_document(
        self, document_id: int, data: dict[str, Any]
    ) -> RequiredDocumentResult:
        """Replace the given fields; raise ResourceNotFoundException if missing."""
        row = await self.get_by_id(document_id)
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, document_id)
        updated = await self.update_fields(row, data)
        logger.info(
            "Updated required document %s fields=%s by %s",
            document_id,
            sorted(data),
            get_current_admin(),
        )
        return _to_result(updated)

    async def delete_document(self, document_id: int) -> bool:
        """Delete a required document; return True if a row was removed."""
        row = await self.get_by_id(document_id)
        if row is None:
            return False
        await self.delete(row)
        logger.info(
            "Deleted required document %s by %s",
            document_id,
            get_current_admin(),
        )
        return True

    async def clone_document(self, document_id: int) -> RequiredDocumentResult:
        """Copy a required document into a new row; raise ResourceNotFoundException if missing."""
        row = await self.get_by_id(document_id)
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, document_id)
        cloned = await self.clone_row(row)
        logger.info(
            "Cloned required document %s into %s by %s",
            document_id,
            cloned.id,
            get_current_admin(),
        )
        return _to_result(cloned)

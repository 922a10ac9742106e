"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.permit_rule_repo import (
    PermitRuleRepository,
)
from app.infrastructure.persistence.repositories.required_document_repo import (
    RequiredDocumentRepository,
)

__all__ = [
    "BaseRepository",
    "PermitRuleRepository",
    "RequiredDocumentRepository",
]

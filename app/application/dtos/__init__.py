"""Application DTOs (no ORM dependency)."""

from app.application.dtos.permit_rule import PermitRuleResult
from app.application.dtos.required_document import RequiredDocumentResult

__all__ = [
    "PermitRuleResult",
    "RequiredDocumentResult",
]

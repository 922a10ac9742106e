"""Pydantic request/response schemas for the API."""

from app.schemas.common import DeleteResponse, PartialUpdate
from app.schemas.health import (
    DatabaseHealthResponse,
    DiagnosticsResponse,
    HealthResponse,
)
from app.schemas.permit_rule import (
    PermitRuleCreate,
    PermitRuleResponse,
    PermitRuleUpdate,
)
from app.schemas.required_document import (
    RequiredDocumentCreate,
    RequiredDocumentResponse,
    RequiredDocumentUpdate,
)

__all__ = [
    "DeleteResponse",
    "PartialUpdate",
    "DatabaseHealthResponse",
    "DiagnosticsResponse",
    "HealthResponse",
    "PermitRuleCreate",
    "PermitRuleResponse",
    "PermitRuleUpdate",
    "RequiredDocumentCreate",
    "RequiredDocumentResponse",
    "RequiredDocumentUpdate",
]

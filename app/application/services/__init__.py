"""Application services: access gate and admin API operations."""

from app.application.services.access_gate import AccessGate
from app.application.services.entity_operations import (
    EntityOperations,
    PermitRuleOperations,
    RequiredDocumentOperations,
)

__all__ = [
    "AccessGate",
    "EntityOperations",
    "PermitRuleOperations",
    "RequiredDocumentOperations",
]

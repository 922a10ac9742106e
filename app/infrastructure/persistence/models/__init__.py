"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    AdminTableModel,
    IntegerIdMixin,
    UpdatedAtMixin,
)
from app.infrastructure.persistence.models.permit_rule import PermitRule
from app.infrastructure.persistence.models.required_document import RequiredDocument

__all__ = [
    "AdminTableModel",
    "IntegerIdMixin",
    "UpdatedAtMixin",
    "PermitRule",
    "RequiredDocument",
]

"""DTOs for required documents (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RequiredDocumentResult:
    """Required document read-model. validation_rules is passed through untouched."""

    id: int
    permit_type: str
    document_name: str
    required_for: str
    is_mandatory: bool
    condition: str | None
    description: str | None
    sort_order: int
    is_active: bool
    updated_at: datetime
    validation_rules: dict[str, Any] = field(default_factory=dict)

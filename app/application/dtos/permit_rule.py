"""DTOs for permit rules (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PermitRuleResult:
    """Permit rule read-model (result of list_all, get, create, update and clone)."""

    id: int
    permit_type: str
    title: str
    rule: str
    category: str
    is_required: bool
    updated_at: datetime

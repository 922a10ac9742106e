"""Permit rule repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.permit_rule import PermitRuleResult
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.permit_rule import PermitRule
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.context import get_current_admin
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

RESOURCE_TYPE = "permit_rule"


def _to_result(r: PermitRule) -> PermitRuleResult:
    """Map ORM to PermitRuleResult."""
    return PermitRuleResult(
        id=r.id,
        permit_type=r.permit_type,
        title=r.title,
        rule=r.rule,
        category=r.category,
        is_required=r.is_required,
        updated_at=ensure_utc(r.updated_at),
    )


class PermitRuleRepository(BaseRepository[PermitRule]):
    """Permit rule repository (newest first)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PermitRule)

    async def list_all(self) -> list[PermitRuleResult]:
        """Return all permit rules ordered by id descending."""
        rows = await self.get_all(PermitRule.id.desc())
        return [_to_result(r) for r in rows]

    async def get(self, rule_id: int) -> PermitRuleResult | None:
        """Return a permit rule by id, or None."""
        row = await self.get_by_id(rule_id)
        return _to_result(row) if row else None

    async def create_rule(self, data: dict[str, Any]) -> PermitRuleResult:
        """Insert a permit rule from validated request fields."""
        writable = self.writable_columns()
        row = await self.create(
            PermitRule(**{k: v for k, v in data.items() if k in writable})
        )
        logger.info(
            "Created permit rule %s (%s) by %s",
            row.id,
            row.permit_type,
            get_current_admin(),
        )
        return _to_result(row)

    async def update_rule(self, rule_id: int, data: dict[str, Any]) -> PermitRuleResult:
        """Replace the given fields; raise ResourceNotFoundException if missing."""
        row = await self.get_by_id(rule_id)
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, rule_id)
        updated = await self.update_fields(row, data)
        logger.info(
            "Updated permit rule %s fields=%s by %s",
            rule_id,
            sorted(data),
            get_current_admin(),
        )
        return _to_result(updated)

    async def delete_rule(self, rule_id: int) -> bool:
        """Delete a permit rule; return True if a row was removed."""
        row = await self.get_by_id(rule_id)
        if row is None:
            return False
        await self.delete(row)
        logger.info("Deleted permit rule %s by %s", rule_id, get_current_admin())
        return True

    async def clone_rule(self, rule_id: int) -> PermitRuleResult:
        """Copy a permit rule into a new row; raise ResourceNotFoundException if missing."""
        row = await self.get_by_id(rule_id)
        if row is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, rule_id)
        cloned = await self.clone_row(row)
        logger.info(
            "Cloned permit rule %s into %s by %s",
            rule_id,
            cloned.id,
            get_current_admin(),
        )
        return _to_result(cloned)

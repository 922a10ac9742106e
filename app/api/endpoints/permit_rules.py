"""Permit rules API: list, get, create, update, delete, clone.

GET, PUT and clone on an id with no row answer 404 with an ``error`` body,
not a generic 500. DELETE on such an id still reports success.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import (
    get_permit_rule_repo,
    get_permit_rule_repo_for_write,
    require_admin,
)
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.repositories.permit_rule_repo import (
    RESOURCE_TYPE,
    PermitRuleRepository,
)
from app.schemas.common import DeleteResponse
from app.schemas.permit_rule import (
    PermitRuleCreate,
    PermitRuleResponse,
    PermitRuleUpdate,
)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=list[PermitRuleResponse])
async def list_permit_rules(
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo)],
):
    """List all permit rules, newest (highest id) first."""
    rules = await repo.list_all()
    return [PermitRuleResponse.model_validate(r) for r in rules]


@router.post("", response_model=PermitRuleResponse)
@limit_writes
async def create_permit_rule(
    request: Request,
    body: PermitRuleCreate,
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo_for_write)],
):
    """Create a permit rule. id and updated_at are assigned by the store."""
    created = await repo.create_rule(body.model_dump(mode="json"))
    return PermitRuleResponse.model_validate(created)


@router.get("/{rule_id}", response_model=PermitRuleResponse)
async def get_permit_rule(
    rule_id: int,
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo)],
):
    """Get a permit rule by id."""
    rule = await repo.get(rule_id)
    if rule is None:
        raise ResourceNotFoundException(RESOURCE_TYPE, rule_id)
    return PermitRuleResponse.model_validate(rule)


@router.put("/{rule_id}", response_model=PermitRuleResponse)
@limit_writes
async def update_permit_rule(
    request: Request,
    rule_id: int,
    body: PermitRuleUpdate,
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo_for_write)],
):
    """Replace only the fields present in the body; updated_at is refreshed."""
    updated = await repo.update_rule(rule_id, body.changes())
    return PermitRuleResponse.model_validate(updated)


@router.delete("/{rule_id}", response_model=DeleteResponse)
@limit_writes
async def delete_permit_rule(
    request: Request,
    rule_id: int,
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo_for_write)],
):
    """Delete a permit rule. Succeeds even when no row has that id."""
    await repo.delete_rule(rule_id)
    return DeleteResponse()


@router.post("/{rule_id}/clone", response_model=PermitRuleResponse)
@limit_writes
async def clone_permit_rule(
    request: Request,
    rule_id: int,
    repo: Annotated[PermitRuleRepository, Depends(get_permit_rule_repo_for_write)],
):
    """Insert a copy of a permit rule with a new id and fresh updated_at."""
    cloned = await repo.clone_rule(rule_id)
    return PermitRuleResponse.model_validate(cloned)

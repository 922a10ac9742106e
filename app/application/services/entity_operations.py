"""Typed admin operations for permit rules and required documents over the admin API.

Failure contract (call sites check for empty/None/False instead of catching):
- get_all: empty list on any failure, logged.
- get_by_id: raises AdminApiError (e.g. status 404 when the row does not exist;
  status 200 when a success body does not match the response model).
- create, update, clone: None on failure, logged.
- delete: False on failure, logged.

Clone is composed client-side: fetch by id, drop store-assigned fields,
create. No transaction spans the two calls; a failed insert leaves nothing
to undo.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from app.core.constants import (
    PERMIT_RULES_PATH,
    REQUIRED_DOCUMENTS_PATH,
    STORE_ASSIGNED_FIELDS,
)
from app.infrastructure.external.admin_api import (
    AdminApiClient,
    AdminApiError,
    get_admin_api_client,
)
from app.schemas.common import PartialUpdate
from app.schemas.permit_rule import PermitRuleResponse
from app.schemas.required_document import RequiredDocumentResponse
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _payload(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """JSON body for create/update without store-assigned fields."""
    if isinstance(data, PartialUpdate):
        body = data.changes()
    elif isinstance(data, BaseModel):
        body = data.model_dump(mode="json")
    else:
        body = dict(data)
    return {k: v for k, v in body.items() if k not in STORE_ASSIGNED_FIELDS}


ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EntityOperations(Generic[ResponseT]):
    """get_all / get_by_id / create / update / delete / clone for one admin resource."""

    resource_path: str
    response_model: type[ResponseT]
    label: str

    def __init__(self, client: AdminApiClient | None = None) -> None:
        self._client = client or get_admin_api_client()
        self._list_adapter = TypeAdapter(list[self.response_model])

    def _item_path(self, entity_id: int) -> str:
        return f"{self.resource_path}/{entity_id}"

    def _log_failure(self, action: str, exc: Exception) -> None:
        if isinstance(exc, AdminApiError):
            logger.error(
                "Failed to %s %s: HTTP %s on %s: %s",
                action,
                self.label,
                exc.status,
                exc.endpoint,
                exc.message,
            )
        else:
            logger.error("Failed to %s %s: %s", action, self.label, exc)

    async def get_all(self) -> list[ResponseT]:
        """Return every row in server order, or [] when the call fails."""
        try:
            rows = await self._client.get(self.resource_path)
            return self._list_adapter.validate_python(rows)
        except (AdminApiError, ValidationError) as exc:
            self._log_failure("list", exc)
            return []

    async def get_by_id(self, entity_id: int) -> ResponseT:
        """Return one row.

        Raises:
            AdminApiError: The row does not exist (404), the call failed, or the
                success body does not match the response model (200).
        """
        path = self._item_path(entity_id)
        row = await self._client.get(path)
        try:
            return self.response_model.model_validate(row)
        except ValidationError as exc:
            raise AdminApiError(str(exc), 200, path) from exc

    async def create(self, data: BaseModel | Mapping[str, Any]) -> ResponseT | None:
        """Create a row; id and updated_at come from the server. None on failure."""
        try:
            row = await self._client.post(self.resource_path, json=_payload(data))
            return self.response_model.model_validate(row)
        except (AdminApiError, ValidationError) as exc:
            self._log_failure("create", exc)
            return None

    async def update(
        self, entity_id: int, data: BaseModel | Mapping[str, Any]
    ) -> ResponseT | None:
        """Replace only the given fields. None on failure."""
        try:
            row = await self._client.put(self._item_path(entity_id), json=_payload(data))
            return self.response_model.model_validate(row)
        except (AdminApiError, ValidationError) as exc:
            self._log_failure("update", exc)
            return None

    async def delete(self, entity_id: int) -> bool:
        """Delete a row. False on failure (a missing row still counts as success)."""
        try:
            await self._client.delete(self._item_path(entity_id))
            return True
        except AdminApiError as exc:
            self._log_failure("delete", exc)
            return False

    async def clone(self, entity_id: int) -> ResponseT | None:
        """Copy a row into a new one (new id, fresh updated_at). None on failure."""
        try:
            source = await self.get_by_id(entity_id)
        except (AdminApiError, ValidationError) as exc:
            self._log_failure("clone", exc)
            return None
        return await self.create(
            source.model_dump(mode="json", exclude=set(STORE_ASSIGNED_FIELDS))
        )


class PermitRuleOperations(EntityOperations[PermitRuleResponse]):
    """Permit rules: newest first."""

    resource_path = PERMIT_RULES_PATH
    response_model = PermitRuleResponse
    label = "permit rule"


class RequiredDocumentOperations(EntityOperations[RequiredDocumentResponse]):
    """Required documents: sort_order ascending, then id descending."""

    resource_path = REQUIRED_DOCUMENTS_PATH
    response_model = RequiredDocumentResponse
    label = "required document"

"""Schemas shared by the admin entity routes."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class PartialUpdate(BaseModel):
    """Base for partial update bodies.

    Only fields present in the request are applied (see changes()). An
    explicit null is rejected unless the field is listed in _nullable_fields.
    """

    model_config = ConfigDict(extra="ignore")

    _nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self) -> "PartialUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self._nullable_fields:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields sent by the client, JSON-compatible (enums as values)."""
        return self.model_dump(mode="json", exclude_unset=True)


class DeleteResponse(BaseModel):
    """Response for DELETE routes. success is true even when the row did not exist."""

    success: bool = True

"""Required document API schemas."""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import RequiredFor
from app.schemas.common import PartialUpdate


class RequiredDocumentCreate(BaseModel):
    """Request body for creating a required document. id and updated_at are store-assigned."""

    model_config = ConfigDict(extra="ignore")

    permit_type: str = Field(..., min_length=1, max_length=100)
    document_name: str = Field(..., min_length=1, max_length=255)
    required_for: RequiredFor
    is_mandatory: bool = True
    condition: str | None = None
    description: str | None = None
    sort_order: int = 0
    is_active: bool = True
    validation_rules: dict[str, Any] = Field(default_factory=dict)


class RequiredDocumentUpdate(PartialUpdate):
    """Request body for updating a required document (partial).

    condition and description may be set to null explicitly.
    """

    _nullable_fields: ClassVar[frozenset[str]] = frozenset({"condition", "description"})

    permit_type: str | None = Field(default=None, min_length=1, max_length=100)
    document_name: str | None = Field(default=None, min_length=1, max_length=255)
    required_for: RequiredFor | None = None
    is_mandatory: bool | None = None
    condition: str | None = None
    description: str | None = None
    sort_order: int | None = None
    is_active: bool | None = None
    validation_rules: dict[str, Any] | None = None


class RequiredDocumentResponse(BaseModel):
    """Required document response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    permit_type: str
    document_name: str
    required_for: RequiredFor
    is_mandatory: bool
    condition: str | None = None
    description: str | None = None
    sort_order: int
    is_active: bool
    validation_rules: dict[str, Any] = Field(default_factory=dict)
    updated_at: datetime

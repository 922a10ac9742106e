"""Permit rule API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import PartialUpdate


class PermitRuleCreate(BaseModel):
    """Request body for creating a permit rule. id and updated_at are store-assigned."""

    model_config = ConfigDict(extra="ignore")

    permit_type: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    rule: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    is_required: bool = False


class PermitRuleUpdate(PartialUpdate):
    """Request body for updating a permit rule (partial)."""

    permit_type: str | None = Field(default=None, min_length=1, max_length=100)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    rule: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    is_required: bool | None = None


class PermitRuleResponse(BaseModel):
    """Permit rule response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    permit_type: str
    title: str
    rule: str
    category: str
    is_required: bool
    updated_at: datetime

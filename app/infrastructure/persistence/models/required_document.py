"""RequiredDocument ORM model. Documents an applicant or employer must provide per permit type."""

from typing import Any

from sqlalchemy import JSON, Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import RequiredFor
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AdminTableModel

_REQUIRED_FOR_VALUES = ", ".join(f"'{v}'" for v in RequiredFor.values())


class RequiredDocument(AdminTableModel, Base):
    """Required document. Table: required_documents.

    permit_type is a soft reference to permit_rules.permit_type (no FK).
    validation_rules is stored verbatim and never interpreted here.
    is_active=False keeps the row but marks it as not currently required.
    """

    __tablename__ = "required_documents"

    permit_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    document_name: Mapped[str] = mapped_column(String(255), nullable=False)
    required_for: Mapped[str] = mapped_column(String(20), nullable=False)
    is_mandatory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    validation_rules: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )

    __table_args__ = (
        CheckConstraint(
            f"required_for IN ({_REQUIRED_FOR_VALUES})",
            name="ck_required_documents_required_for",
        ),
    )

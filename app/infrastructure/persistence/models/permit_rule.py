"""PermitRule ORM model. One rule text per permit type, grouped by free-form category."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AdminTableModel


class PermitRule(AdminTableModel, Base):
    """Permit rule. Table: permit_rules.

    category is not an enumeration; a new category appears as soon as a rule
    uses it.
    """

    __tablename__ = "permit_rules"

    permit_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    rule: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

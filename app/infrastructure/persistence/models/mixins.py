"""SQLAlchemy mixins shared by the admin tables.

Provides: IntegerIdMixin, UpdatedAtMixin, and the combined AdminTableModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.datetime import utc_now


class IntegerIdMixin:
    """Mixin for store-assigned integer primary keys (autoincrement)."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class UpdatedAtMixin:
    """Mixin for updated_at (timezone-aware, set on insert and on every update).

    Python-side default/onupdate keep sub-second precision on backends whose
    now() has second resolution (SQLite); server_default covers raw SQL inserts.
    """

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            onupdate=utc_now,
            server_default=func.now(),
            nullable=False,
        )


class AdminTableModel(IntegerIdMixin, UpdatedAtMixin):
    """Combined mixin: integer id + updated_at. Common for admin reference tables."""

    __abstract__ = True

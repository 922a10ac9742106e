"""create_permit_rules_and_required_documents

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-19 09:12:41.508113

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create permit_rules and required_documents."""
    op.create_table(
        "permit_rules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("permit_type", sa.String(length=100), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("rule", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("is_required", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_permit_rules_permit_type", "permit_rules", ["permit_type"])
    op.create_index("ix_permit_rules_category", "permit_rules", ["category"])

    op.create_table(
        "required_documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("permit_type", sa.String(length=100), nullable=False),
        sa.Column("document_name", sa.String(length=255), nullable=False),
        sa.Column("required_for", sa.String(length=20), nullable=False),
        sa.Column("is_mandatory", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("condition", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("sort_order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("validation_rules", sa.JSON(), server_default="{}", nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint(
            "required_for IN ('employee', 'employer', 'both')",
            name="ck_required_documents_required_for",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_required_documents_permit_type", "required_documents", ["permit_type"]
    )


def downgrade() -> None:
    """Drop required_documents and permit_rules."""
    op.drop_index("ix_required_documents_permit_type", table_name="required_documents")
    op.drop_table("required_documents")
    op.drop_index("ix_permit_rules_category", table_name="permit_rules")
    op.drop_index("ix_permit_rules_permit_type", table_name="permit_rules")
    op.drop_table("permit_rules")

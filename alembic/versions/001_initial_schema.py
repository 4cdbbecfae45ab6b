"""Initial schema - permission catalog and per-user overrides.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "permission",
        sa.Column("code", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_permission_category", "permission", ["category"])

    # No foreign key to permission: overrides may name codes the catalog does not hold.
    op.create_table(
        "user_permission",
        sa.Column("user_id", sa.Integer(), primary_key=True),
        sa.Column("permission_code", sa.String(100), primary_key=True),
        sa.Column("is_denied", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("granted_by", sa.Integer(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("user_permission")
    op.drop_index("ix_permission_category", table_name="permission")
    op.drop_table("permission")

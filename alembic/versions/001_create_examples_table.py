"""create examples table

Revision ID: 001
Revises:
Create Date: 2026-09-28 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "examples",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("country", sa.String(64), nullable=False),
        sa.Column("salary", sa.Numeric(14, 2), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("version >= 0", name="ck_examples_version_non_negative"),
        sa.CheckConstraint(
            "created_at <= updated_at", name="ck_examples_created_before_updated"
        ),
    )
    # Email lookups back the uniqueness rule
    op.create_index("ix_examples_email", "examples", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_examples_email", table_name="examples")
    op.drop_table("examples")

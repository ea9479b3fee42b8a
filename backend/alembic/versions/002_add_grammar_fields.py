"""Add grammar entry columns to lexical_records.

Revision ID: 002
Revises: 001
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "002"
down_revision: str | Sequence[str] | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("lexical_records") as batch_op:
        batch_op.add_column(
            sa.Column("structure", sa.Text(), nullable=False, server_default="")
        )
        batch_op.add_column(sa.Column("usage", sa.Text(), nullable=True))
        batch_op.add_column(sa.Column("notes", sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("lexical_records") as batch_op:
        batch_op.drop_column("notes")
        batch_op.drop_column("usage")
        batch_op.drop_column("structure")

"""Create lexical_records, boards, lessons and board_items tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create the catalog tables."""
    op.create_table(
        "lexical_records",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("headword", sa.String(255), nullable=False),
        sa.Column("headword_key", sa.String(255), nullable=False),
        sa.Column("phonetic", sa.String(255), nullable=False),
        sa.Column("meaning", sa.Text(), nullable=False),
        sa.Column("audio_url", sa.String(1000), nullable=False),
        sa.Column("band", sa.Float(), nullable=True),
        sa.Column("level", sa.String(20), nullable=False),
        sa.Column("examples", sa.JSON(), nullable=False),
        sa.Column("synonyms", sa.JSON(), nullable=False),
        sa.Column("topics", sa.JSON(), nullable=False),
        sa.Column("types", sa.JSON(), nullable=False),
        sa.Column("word_forms", sa.JSON(), nullable=False),
        sa.Column("grammar", sa.Text(), nullable=True),
        sa.Column("expression_type", sa.String(20), nullable=True),
        sa.Column("category", sa.String(50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("kind", "headword_key", name="uq_lexical_records_kind_headword_key"),
    )
    op.create_index(op.f("ix_lexical_records_kind"), "lexical_records", ["kind"], unique=False)
    op.create_index(
        op.f("ix_lexical_records_headword_key"), "lexical_records", ["headword_key"], unique=False
    )
    op.create_index(op.f("ix_lexical_records_level"), "lexical_records", ["level"], unique=False)

    op.create_table(
        "boards",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(50), nullable=True),
        sa.Column("icon", sa.String(50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_boards_type"), "boards", ["type"], unique=False)

    op.create_table(
        "lessons",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("board_id", sa.String(32), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["board_id"], ["boards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_lessons_board_id"), "lessons", ["board_id"], unique=False)

    op.create_table(
        "board_items",
        sa.Column("board_id", sa.String(32), nullable=False),
        sa.Column("record_id", sa.String(32), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["board_id"], ["boards.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["record_id"], ["lexical_records.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("board_id", "record_id"),
    )
    op.create_index(op.f("ix_board_items_board_id"), "board_items", ["board_id"], unique=False)
    op.create_index(op.f("ix_board_items_record_id"), "board_items", ["record_id"], unique=False)


def downgrade() -> None:
    """Drop the catalog tables."""
    op.drop_index(op.f("ix_board_items_record_id"), table_name="board_items")
    op.drop_index(op.f("ix_board_items_board_id"), table_name="board_items")
    op.drop_table("board_items")
    op.drop_index(op.f("ix_lessons_board_id"), table_name="lessons")
    op.drop_table("lessons")
    op.drop_index(op.f("ix_boards_type"), table_name="boards")
    op.drop_table("boards")
    op.drop_index(op.f("ix_lexical_records_level"), table_name="lexical_records")
    op.drop_index(op.f("ix_lexical_records_headword_key"), table_name="lexical_records")
    op.drop_index(op.f("ix_lexical_records_kind"), table_name="lexical_records")
    op.drop_table("lexical_records")

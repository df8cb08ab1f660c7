"""Create decks, generations and flashcards tables.

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
    """Create decks, generations and flashcards tables."""
    op.create_table(
        "decks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_decks_user_id"), "decks", ["user_id"], unique=False)

    op.create_table(
        "generations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("deck_id", sa.Uuid(), nullable=False),
        sa.Column("model", sa.String(255), nullable=False),
        sa.Column("generated_count", sa.Integer(), nullable=False),
        sa.Column("source_text_hash", sa.String(64), nullable=False),
        sa.Column("source_text_length", sa.Integer(), nullable=False),
        sa.Column("generation_duration", sa.Integer(), nullable=False),
        sa.Column("accepted_unedited_count", sa.Integer(), nullable=True),
        sa.Column("accepted_edited_count", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["deck_id"], ["decks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_generations_user_id"), "generations", ["user_id"], unique=False)
    op.create_index(op.f("ix_generations_deck_id"), "generations", ["deck_id"], unique=False)
    op.create_index(
        op.f("ix_generations_source_text_hash"), "generations", ["source_text_hash"], unique=False
    )

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("deck_id", sa.Uuid(), nullable=False),
        sa.Column("generation_id", sa.Uuid(), nullable=True),
        sa.Column("front", sa.String(200), nullable=False),
        sa.Column("back", sa.Text(), nullable=False),
        sa.Column("source", sa.String(20), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "source IN ('manual', 'ai-full', 'ai-edited')", name="ck_flashcards_source"
        ),
        sa.ForeignKeyConstraint(["deck_id"], ["decks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["generation_id"], ["generations.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_deck_id"), "flashcards", ["deck_id"], unique=False)
    op.create_index(
        op.f("ix_flashcards_generation_id"), "flashcards", ["generation_id"], unique=False
    )


def downgrade() -> None:
    """Drop flashcards, generations and decks tables."""
    op.drop_index(op.f("ix_flashcards_generation_id"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_deck_id"), table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index(op.f("ix_generations_source_text_hash"), table_name="generations")
    op.drop_index(op.f("ix_generations_deck_id"), table_name="generations")
    op.drop_index(op.f("ix_generations_user_id"), table_name="generations")
    op.drop_table("generations")
    op.drop_index(op.f("ix_decks_user_id"), table_name="decks")
    op.drop_table("decks")

"""create_journal_entries

Create the journal entries table.

Revision ID: 3c1f7a9d2e64
Revises:
Create Date: 2026-10-19 10:12:04.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2e64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "journal_entries",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
    )

    op.create_index(
        "idx_journal_entries_created_at", "journal_entries", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_journal_entries_created_at", table_name="journal_entries")
    op.drop_table("journal_entries")

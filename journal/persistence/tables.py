"""SQLAlchemy table definitions for the journal.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# JOURNAL ENTRIES TABLE
# ============================================================================
journal_entries_table = Table(
    "journal_entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("photo_url", Text, nullable=True),  # Set once, at creation
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index("idx_journal_entries_created_at", journal_entries_table.c.created_at)

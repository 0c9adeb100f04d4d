"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from journal.domain.model import EntryDraft, JournalEntry
from journal.domain.value import EntryId


def row_to_entry(row: Dict[str, Any]) -> JournalEntry:
    """Convert database row to JournalEntry domain model.

    Args:
        row: Database row as dict

    Returns:
        JournalEntry domain model
    """
    return JournalEntry(
        id=EntryId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row["title"],
        description=row["description"],
        likes=row["likes"],
        created_at=row["created_at"],
        photo_url=row.get("photo_url"),
    )


def draft_to_dict(draft: EntryDraft) -> Dict[str, Any]:
    """Convert EntryDraft to a database dict for insertion.

    id, likes and created_at are left to column defaults.
    """
    return draft.model_dump()

"""In-memory implementation of the journal entry repository for testing."""

from copy import deepcopy
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from journal.domain.model import EntryDraft, JournalEntry
from journal.domain.repository import JournalEntryRepository
from journal.domain.value import EntryId


class InMemoryJournalEntryRepository(JournalEntryRepository):
    """In-memory implementation of JournalEntryRepository for testing.

    Nothing awaits between reading and writing an entry, so each operation
    is atomic with respect to other tasks on the event loop.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._entries: dict[EntryId, JournalEntry] = {}

    async def create(self, draft: EntryDraft) -> JournalEntry:
        """Store a new entry with a fresh id."""
        entry = JournalEntry(
            id=EntryId(uuid4()),
            title=draft.title,
            description=draft.description,
            likes=0,
            created_at=datetime.now(timezone.utc),
            photo_url=draft.photo_url,
        )
        self._entries[entry.id] = entry
        return deepcopy(entry)

    async def find_all(self) -> List[JournalEntry]:
        """Find all entries in insertion order."""
        return [deepcopy(entry) for entry in self._entries.values()]

    async def find_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Find entry by ID."""
        entry = self._entries.get(entry_id)
        return deepcopy(entry) if entry else None

    async def increment_likes(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Increment likes by 1."""
        entry = self._entries.get(entry_id)
        if not entry:
            return None

        updated = entry.model_copy(update={"likes": entry.likes + 1})
        self._entries[entry_id] = updated
        return deepcopy(updated)

    async def delete_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Delete an entry."""
        entry = self._entries.pop(entry_id, None)
        return deepcopy(entry) if entry else None

"""Journal entry repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from journal.domain.model import EntryDraft, JournalEntry
from journal.domain.value import EntryId


class JournalEntryRepository(ABC):
    """Repository for the JournalEntry aggregate.

    Defines the contract for entry persistence operations.
    Implementations live in the persistence layer and raise StorageError
    when the underlying store fails.
    """

    @abstractmethod
    async def create(self, draft: EntryDraft) -> JournalEntry:
        """Persist a new entry.

        The store assigns the id and creation time.

        Args:
            draft: Entry content

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[JournalEntry]:
        """Find every entry, in creation order.

        Returns:
            List of all entries
        """
        pass

    @abstractmethod
    async def find_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Find an entry by ID.

        Args:
            entry_id: The entry's unique identifier

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def increment_likes(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Atomically increment likes by 1.

        Must be a single update at the store, not a read-modify-write,
        so concurrent likes are never lost.

        Args:
            entry_id: The entry ID

        Returns:
            The updated entry, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Delete an entry.

        Args:
            entry_id: The entry ID

        Returns:
            The deleted entry, or None if it doesn't exist
        """
        pass

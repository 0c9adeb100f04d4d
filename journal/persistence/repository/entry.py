"""PostgreSQL implementation of the journal entry repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journal.domain.error import StorageError
from journal.domain.model import EntryDraft, JournalEntry
from journal.domain.repository import JournalEntryRepository
from journal.domain.value import EntryId
from journal.persistence.mappers import draft_to_dict, row_to_entry
from journal.persistence.tables import journal_entries_table


class PostgresJournalEntryRepository(JournalEntryRepository):
    """PostgreSQL implementation of JournalEntryRepository.

    Driver failures are re-raised as StorageError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, draft: EntryDraft) -> JournalEntry:
        """Insert a new entry and return it with its assigned id and date."""
        with logfire.span("entry_repository.create", title=draft.title):
            stmt = (
                insert(journal_entries_table)
                .values(**draft_to_dict(draft))
                .returning(journal_entries_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error("Failed to insert journal entry", error=str(e))
                raise StorageError(str(e)) from e

            return row_to_entry(row._asdict())

    async def find_all(self) -> List[JournalEntry]:
        """Find every entry, oldest first."""
        with logfire.span("entry_repository.find_all"):
            stmt = select(journal_entries_table).order_by(
                journal_entries_table.c.created_at
            )
            try:
                result = await self.session.execute(stmt)
                rows = result.fetchall()
            except SQLAlchemyError as e:
                logfire.error("Failed to fetch journal entries", error=str(e))
                raise StorageError(str(e)) from e

            return [row_to_entry(row._asdict()) for row in rows]

    async def find_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Find an entry by ID."""
        with logfire.span("entry_repository.find_by_id", entry_id=str(entry_id)):
            stmt = select(journal_entries_table).where(
                journal_entries_table.c.id == entry_id
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to fetch journal entry", entry_id=str(entry_id), error=str(e)
                )
                raise StorageError(str(e)) from e

            return row_to_entry(row._asdict()) if row else None

    async def increment_likes(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Atomically increment likes by 1."""
        with logfire.span("entry_repository.increment_likes", entry_id=str(entry_id)):
            stmt = (
                update(journal_entries_table)
                .where(journal_entries_table.c.id == entry_id)
                .values(likes=journal_entries_table.c.likes + 1)
                .returning(journal_entries_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to increment likes", entry_id=str(entry_id), error=str(e)
                )
                raise StorageError(str(e)) from e

            return row_to_entry(row._asdict()) if row else None

    async def delete_by_id(self, entry_id: EntryId) -> Optional[JournalEntry]:
        """Delete an entry and return the removed row."""
        with logfire.span("entry_repository.delete_by_id", entry_id=str(entry_id)):
            stmt = (
                delete(journal_entries_table)
                .where(journal_entries_table.c.id == entry_id)
                .returning(journal_entries_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to delete journal entry", entry_id=str(entry_id), error=str(e)
                )
                raise StorageError(str(e)) from e

            return row_to_entry(row._asdict()) if row else None

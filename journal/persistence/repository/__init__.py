"""PostgreSQL repository implementations."""

from journal.persistence.repository.entry import PostgresJournalEntryRepository

__all__ = [
    "PostgresJournalEntryRepository",
]

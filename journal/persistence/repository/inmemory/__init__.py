"""In-memory repository implementations for testing."""

from .entry import InMemoryJournalEntryRepository

__all__ = [
    "InMemoryJournalEntryRepository",
]

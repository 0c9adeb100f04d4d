"""Domain model entities for the journal."""

from journal.domain.model.entry import EntryDraft, JournalEntry

__all__ = [
    "EntryDraft",
    "JournalEntry",
]

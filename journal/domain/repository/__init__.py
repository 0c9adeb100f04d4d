"""Repository interfaces for the journal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from journal.domain.repository.entry import JournalEntryRepository

__all__ = [
    "JournalEntryRepository",
]

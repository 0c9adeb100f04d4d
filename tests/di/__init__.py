"""Mock providers for testing."""

from .media import MockMediaProvider, RejectingMediaProvider
from .persistence import (
    FailingJournalEntryRepository,
    FailingPersistenceProvider,
    MockPersistenceProvider,
)
from .container import build_test_container

__all__ = [
    "MockMediaProvider",
    "RejectingMediaProvider",
    "MockPersistenceProvider",
    "FailingJournalEntryRepository",
    "FailingPersistenceProvider",
    "build_test_container",
]

"""Domain value objects for the journal."""

from journal.domain.value.identifiers import EntryId
from journal.domain.value.types import UploadResult

__all__ = [
    "EntryId",
    "UploadResult",
]

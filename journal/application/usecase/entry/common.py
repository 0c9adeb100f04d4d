"""Shared journal entry DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from journal.domain.error import NotFoundError
from journal.domain.model import JournalEntry
from journal.domain.value import EntryId


class JournalEntryResponse(BaseModel):
    """Journal entry as returned to clients.

    Serialized with the field names journal clients already use:
    ``{_id, Title, Description, Likes, Date, Photo}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str = Field(alias="Title")
    description: str = Field(alias="Description")
    likes: int = Field(alias="Likes")
    date: datetime = Field(alias="Date")
    photo: str | None = Field(default=None, alias="Photo")

    @classmethod
    def from_entry(cls, entry: JournalEntry) -> "JournalEntryResponse":
        """Build a response from a domain entry."""
        return cls(
            id=str(entry.id),
            title=entry.title,
            description=entry.description,
            likes=entry.likes,
            date=entry.created_at,
            photo=entry.photo_url,
        )


def parse_entry_id(raw: str) -> EntryId:
    """Parse a client-supplied entry id.

    A malformed id cannot name any entry, so it is reported as not found.

    Raises:
        NotFoundError: If ``raw`` is not a valid UUID
    """
    try:
        return EntryId(UUID(raw))
    except ValueError:
        raise NotFoundError("journal", raw)

"""Journal entry entity.

An entry is a titled, described journal record that readers can like.
It may carry a photo uploaded to the media host when it was created.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from journal.domain.model.common import DomainModel
from journal.domain.value import EntryId


class EntryDraft(DomainModel):
    """Input shape for a new entry, before the store assigns id and date."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    photo_url: Optional[str] = None


class JournalEntry(DomainModel):
    """Journal entry aggregate root.

    Business rules:
    - likes only ever go up, one at a time
    - photo_url is fixed at creation (there is no photo update)
    - title and description cannot be edited
    """

    id: EntryId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    photo_url: Optional[str] = None

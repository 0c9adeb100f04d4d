"""Like journal entry use case."""

from pydantic import BaseModel

from journal.domain.service import EntryService

from .common import JournalEntryResponse, parse_entry_id


class LikeEntryRequest(BaseModel):
    """Like entry request."""

    entry_id: str  # UUID string from the URL


class LikeEntryUseCase:
    """Use case for adding a like to a journal entry."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize like entry use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: LikeEntryRequest) -> JournalEntryResponse:
        """Execute like flow.

        Args:
            request: Like entry request

        Returns:
            The entry with its incremented like count

        Raises:
            NotFoundError: If the entry doesn't exist or the id is malformed
        """
        entry_id = parse_entry_id(request.entry_id)
        entry = await self.entry_service.like_entry(entry_id)
        return JournalEntryResponse.from_entry(entry)

"""Get journal entry use case."""

from pydantic import BaseModel

from journal.domain.service import EntryService

from .common import JournalEntryResponse, parse_entry_id


class GetEntryRequest(BaseModel):
    """Get entry request."""

    entry_id: str  # UUID string from the URL


class GetEntryUseCase:
    """Use case for fetching a single journal entry."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self, request: GetEntryRequest) -> JournalEntryResponse:
        """Execute get entry flow.

        Raises:
            NotFoundError: If the entry doesn't exist or the id is malformed
        """
        entry_id = parse_entry_id(request.entry_id)
        entry = await self.entry_service.get_entry(entry_id)
        return JournalEntryResponse.from_entry(entry)

"""Delete journal entry use case."""

from pydantic import BaseModel

from journal.domain.service import EntryService

from .common import JournalEntryResponse, parse_entry_id


class DeleteEntryRequest(BaseModel):
    """Delete entry request."""

    entry_id: str  # UUID string from the URL


class DeleteEntryUseCase:
    """Use case for deleting a journal entry."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize delete entry use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: DeleteEntryRequest) -> JournalEntryResponse:
        """Execute delete flow.

        Args:
            request: Delete entry request

        Returns:
            The deleted entry

        Raises:
            NotFoundError: If the entry doesn't exist or the id is malformed
        """
        entry_id = parse_entry_id(request.entry_id)
        entry = await self.entry_service.delete_entry(entry_id)
        return JournalEntryResponse.from_entry(entry)

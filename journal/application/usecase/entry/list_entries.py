"""List journal entries use case."""

from pydantic import BaseModel

from journal.domain.service import EntryService

from .common import JournalEntryResponse


class ListEntriesResponse(BaseModel):
    """List entries response."""

    entries: list[JournalEntryResponse]


class ListEntriesUseCase:
    """Use case for listing every journal entry."""

    def __init__(self, entry_service: EntryService) -> None:
        self.entry_service = entry_service

    async def execute(self) -> ListEntriesResponse:
        """Execute list entries flow.

        Returns:
            All entries in creation order
        """
        entries = await self.entry_service.list_entries()
        return ListEntriesResponse(
            entries=[JournalEntryResponse.from_entry(entry) for entry in entries]
        )

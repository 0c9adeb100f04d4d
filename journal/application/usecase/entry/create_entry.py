"""Create journal entry use case."""

from pydantic import BaseModel

from journal.domain.service import EntryService

from .common import JournalEntryResponse


class CreateEntryRequest(BaseModel):
    """Create entry request."""

    title: str | None = None
    description: str | None = None
    photo: bytes | None = None  # Raw upload, held in memory for this request only
    filename: str | None = None


class CreateEntryUseCase:
    """Use case for creating a journal entry with an optional photo."""

    def __init__(self, entry_service: EntryService) -> None:
        """Initialize create entry use case.

        Args:
            entry_service: Entry domain service
        """
        self.entry_service = entry_service

    async def execute(self, request: CreateEntryRequest) -> JournalEntryResponse:
        """Execute create entry flow.

        Args:
            request: Create entry request

        Returns:
            The created entry

        Raises:
            ValidationError: If title or description is missing
            UploadError: If the photo upload fails
            StorageError: If the entry could not be stored
        """
        entry = await self.entry_service.create_entry(
            title=request.title,
            description=request.description,
            photo=request.photo,
            filename=request.filename,
        )
        return JournalEntryResponse.from_entry(entry)

"""Journal entry domain service."""

import logfire

from journal.domain.error import NotFoundError, StorageError, ValidationError
from journal.domain.model import EntryDraft, JournalEntry
from journal.domain.repository import JournalEntryRepository
from journal.domain.value import EntryId

from .base import Service
from .media_service import MediaUploader


class EntryService(Service):
    """Domain service for journal entry operations.

    Orchestrates the media uploader and the entry repository. Every call is
    an independent transaction against those two collaborators.
    """

    def __init__(
        self,
        entry_repository: JournalEntryRepository,
        media_uploader: MediaUploader,
    ) -> None:
        """Initialize entry service.

        Args:
            entry_repository: Journal entry repository
            media_uploader: Media host client for entry photos
        """
        self.entry_repository = entry_repository
        self.media_uploader = media_uploader

    async def create_entry(
        self,
        title: str | None,
        description: str | None,
        photo: bytes | None = None,
        filename: str | None = None,
    ) -> JournalEntry:
        """Create a journal entry, uploading its photo first if one is given.

        Steps:
        1. Validate title and description (nothing is uploaded or stored on failure)
        2. Upload the photo, if any (nothing is stored if the upload fails)
        3. Persist the entry with the uploaded photo's URL

        If the upload succeeds and the store write then fails, the uploaded
        object is left at the media host. Its URL is logged so it can be
        removed by hand.

        Args:
            title: Entry title
            description: Entry description
            photo: Photo bytes, or None for an entry without a photo
            filename: Original filename of the photo

        Returns:
            The created entry

        Raises:
            ValidationError: If title or description is missing or blank
            UploadError: If the photo upload fails
            StorageError: If the entry could not be stored
        """
        if title is None or not title.strip():
            raise ValidationError("Please Enter Title")
        if description is None or not description.strip():
            raise ValidationError("Please Enter Description")

        with logfire.span(
            "entry_service.create_entry",
            title=title,
            has_photo=photo is not None,
        ):
            photo_url = None
            if photo is not None:
                result = await self.media_uploader.upload(photo, filename=filename)
                photo_url = result.url
                logfire.info(
                    "Photo uploaded", photo_url=photo_url, public_id=result.public_id
                )

            draft = EntryDraft(
                title=title, description=description, photo_url=photo_url
            )

            try:
                entry = await self.entry_repository.create(draft)
            except StorageError as e:
                if photo_url:
                    logfire.error(
                        "Entry not stored, uploaded photo is orphaned",
                        photo_url=photo_url,
                        error=str(e),
                    )
                raise

            logfire.info("Journal entry created", entry_id=str(entry.id))
            return entry

    async def list_entries(self) -> list[JournalEntry]:
        """List all journal entries.

        Returns:
            All entries in creation order
        """
        with logfire.span("entry_service.list_entries"):
            entries = await self.entry_repository.find_all()
            logfire.info("Journal entries listed", count=len(entries))
            return entries

    async def get_entry(self, entry_id: EntryId) -> JournalEntry:
        """Get a journal entry by ID.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        with logfire.span("entry_service.get_entry", entry_id=str(entry_id)):
            entry = await self.entry_repository.find_by_id(entry_id)
            if not entry:
                logfire.warn("Journal entry not found", entry_id=str(entry_id))
                raise NotFoundError("journal", str(entry_id))
            return entry

    async def like_entry(self, entry_id: EntryId) -> JournalEntry:
        """Add one like to an entry.

        Args:
            entry_id: Entry ID

        Returns:
            The entry with its new like count

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        with logfire.span("entry_service.like_entry", entry_id=str(entry_id)):
            entry = await self.entry_repository.increment_likes(entry_id)
            if not entry:
                logfire.warn("Like on non-existent entry", entry_id=str(entry_id))
                raise NotFoundError("journal", str(entry_id))

            logfire.info("Journal entry liked", entry_id=str(entry_id), likes=entry.likes)
            return entry

    async def delete_entry(self, entry_id: EntryId) -> JournalEntry:
        """Delete an entry.

        Args:
            entry_id: Entry ID

        Returns:
            The deleted entry

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        with logfire.span("entry_service.delete_entry", entry_id=str(entry_id)):
            entry = await self.entry_repository.delete_by_id(entry_id)
            if not entry:
                logfire.warn("Delete of non-existent entry", entry_id=str(entry_id))
                raise NotFoundError("journal", str(entry_id))

            logfire.info(
                "Journal entry deleted", entry_id=str(entry_id), title=entry.title
            )
            return entry

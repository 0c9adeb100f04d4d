"""Domain layer DI providers."""

from dishka import Scope, provide

from journal.domain.repository import JournalEntryRepository
from journal.domain.service import EntryService, MediaUploader
from journal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_entry_service(
        self,
        entry_repository: JournalEntryRepository,
        media_uploader: MediaUploader,
    ) -> EntryService:
        """Provide journal entry domain service."""
        return EntryService(
            entry_repository=entry_repository, media_uploader=media_uploader
        )

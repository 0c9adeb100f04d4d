"""Application layer DI providers."""

from dishka import Scope, provide

from journal.application.usecase.entry import (
    CreateEntryUseCase,
    DeleteEntryUseCase,
    GetEntryUseCase,
    LikeEntryUseCase,
    ListEntriesUseCase,
)
from journal.domain.service import EntryService
from journal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_entry_use_case(
        self, entry_service: EntryService
    ) -> CreateEntryUseCase:
        """Provide create entry use case."""
        return CreateEntryUseCase(entry_service=entry_service)

    @provide(scope=Scope.REQUEST)
    def get_list_entries_use_case(
        self, entry_service: EntryService
    ) -> ListEntriesUseCase:
        """Provide list entries use case."""
        return ListEntriesUseCase(entry_service=entry_service)

    @provide(scope=Scope.REQUEST)
    def get_get_entry_use_case(self, entry_service: EntryService) -> GetEntryUseCase:
        """Provide get entry use case."""
        return GetEntryUseCase(entry_service=entry_service)

    @provide(scope=Scope.REQUEST)
    def get_like_entry_use_case(self, entry_service: EntryService) -> LikeEntryUseCase:
        """Provide like entry use case."""
        return LikeEntryUseCase(entry_service=entry_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_entry_use_case(
        self, entry_service: EntryService
    ) -> DeleteEntryUseCase:
        """Provide delete entry use case."""
        return DeleteEntryUseCase(entry_service=entry_service)

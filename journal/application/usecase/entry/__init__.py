"""Journal entry use cases."""

from .common import JournalEntryResponse
from .create_entry import CreateEntryRequest, CreateEntryUseCase
from .delete_entry import DeleteEntryRequest, DeleteEntryUseCase
from .get_entry import GetEntryRequest, GetEntryUseCase
from .like_entry import LikeEntryRequest, LikeEntryUseCase
from .list_entries import ListEntriesResponse, ListEntriesUseCase

__all__ = [
    "JournalEntryResponse",
    "CreateEntryRequest",
    "CreateEntryUseCase",
    "DeleteEntryRequest",
    "DeleteEntryUseCase",
    "GetEntryRequest",
    "GetEntryUseCase",
    "LikeEntryRequest",
    "LikeEntryUseCase",
    "ListEntriesResponse",
    "ListEntriesUseCase",
]

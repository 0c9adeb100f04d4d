"""Domain services."""

from .base import Service
from .entry_service import EntryService
from .media_service import MediaUploader

__all__ = [
    "EntryService",
    "MediaUploader",
    "Service",
]

"""Strongly typed identifiers for journal domain entities."""

from typing import NewType
from uuid import UUID

EntryId = NewType("EntryId", UUID)

"""Integration tests for PostgresJournalEntryRepository.

Runs against a real database with migrations applied. Skipped unless
DATABASE__URL is set.
"""

import os
from uuid import uuid4

import pytest

from journal.domain.repository import JournalEntryRepository
from journal.domain.value import EntryId
from tests.conftest import make_draft
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set, no database to test against",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestJournalEntryRepositoryIntegration:
    """Integration tests for PostgresJournalEntryRepository."""

    @pytest.mark.asyncio
    async def test_create_uses_column_defaults(self, integration_env):
        """Should get id, likes and date from the database."""
        entry_repo = await integration_env.get(JournalEntryRepository)

        entry = await entry_repo.create(make_draft(photo_url="https://example.com/p.png"))

        assert entry.id is not None
        assert entry.likes == 0
        assert entry.created_at.tzinfo is not None
        assert entry.photo_url == "https://example.com/p.png"

    @pytest.mark.asyncio
    async def test_find_all_includes_created_entry(self, integration_env):
        """Should list a created entry after older ones."""
        entry_repo = await integration_env.get(JournalEntryRepository)
        first = await entry_repo.create(make_draft(title="Day 1"))
        second = await entry_repo.create(make_draft(title="Day 2"))

        ids = [e.id for e in await entry_repo.find_all()]

        assert ids.index(first.id) < ids.index(second.id)

    @pytest.mark.asyncio
    async def test_increment_likes_is_a_single_update(self, integration_env):
        """Should return the incremented row."""
        entry_repo = await integration_env.get(JournalEntryRepository)
        entry = await entry_repo.create(make_draft())

        await entry_repo.increment_likes(entry.id)
        updated = await entry_repo.increment_likes(entry.id)

        assert updated.likes == 2
        assert (await entry_repo.find_by_id(entry.id)).likes == 2

    @pytest.mark.asyncio
    async def test_missing_ids_return_none(self, integration_env):
        """Should return None for ids with no row."""
        entry_repo = await integration_env.get(JournalEntryRepository)
        entry_id = EntryId(uuid4())

        assert await entry_repo.find_by_id(entry_id) is None
        assert await entry_repo.increment_likes(entry_id) is None
        assert await entry_repo.delete_by_id(entry_id) is None

    @pytest.mark.asyncio
    async def test_delete_returns_removed_row(self, integration_env):
        """Should delete the row and hand it back."""
        entry_repo = await integration_env.get(JournalEntryRepository)
        entry = await entry_repo.create(make_draft())

        deleted = await entry_repo.delete_by_id(entry.id)

        assert deleted.id == entry.id
        assert await entry_repo.find_by_id(entry.id) is None

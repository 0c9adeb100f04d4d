"""Unit tests for PostgresJournalEntryRepository with a stubbed session."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from journal.domain.error import StorageError
from journal.domain.value import EntryId
from journal.persistence.repository import PostgresJournalEntryRepository
from tests.conftest import make_draft


def _failing_session():
    session = MagicMock()
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
    )
    session.flush = AsyncMock()
    return session


def _session_returning(row):
    result = MagicMock()
    result.fetchone = MagicMock(return_value=row)
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    session.flush = AsyncMock()
    return session


class TestDriverFailures:
    """Driver errors surface as StorageError."""

    @pytest.mark.asyncio
    async def test_create(self):
        entry_repo = PostgresJournalEntryRepository(_failing_session())

        with pytest.raises(StorageError, match="connection refused"):
            await entry_repo.create(make_draft())

    @pytest.mark.asyncio
    async def test_find_all(self):
        entry_repo = PostgresJournalEntryRepository(_failing_session())

        with pytest.raises(StorageError, match="connection refused"):
            await entry_repo.find_all()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method", ["find_by_id", "increment_likes", "delete_by_id"]
    )
    async def test_by_id_operations(self, method):
        entry_repo = PostgresJournalEntryRepository(_failing_session())

        with pytest.raises(StorageError, match="connection refused"):
            await getattr(entry_repo, method)(EntryId(uuid4()))


class TestReturnedRows:
    """Rows returned by RETURNING are mapped onto entries."""

    @pytest.mark.asyncio
    async def test_increment_likes_maps_returned_row(self):
        """Should map the updated row, flushing after the update."""
        entry_id = uuid4()
        row = MagicMock()
        row._asdict = MagicMock(return_value={
            "id": entry_id,
            "title": "Day 1",
            "description": "First entry",
            "likes": 3,
            "created_at": datetime.now(timezone.utc),
            "photo_url": None,
        })
        session = _session_returning(row)
        entry_repo = PostgresJournalEntryRepository(session)

        entry = await entry_repo.increment_likes(EntryId(entry_id))

        assert entry.id == entry_id
        assert entry.likes == 3
        session.execute.assert_awaited_once()
        session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_row_returns_none(self):
        """Should return None when no row matched."""
        entry_repo = PostgresJournalEntryRepository(_session_returning(None))

        assert await entry_repo.delete_by_id(EntryId(uuid4())) is None

"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from journal.persistence.mappers import draft_to_dict, row_to_entry
from tests.conftest import make_draft


class TestRowToEntry:
    """Tests for row_to_entry."""

    def test_maps_all_columns(self):
        """Should map every column onto the entry."""
        entry_id = uuid4()
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)

        entry = row_to_entry({
            "id": entry_id,
            "title": "Day 1",
            "description": "First entry",
            "likes": 4,
            "created_at": created_at,
            "photo_url": "https://res.cloudinary.com/demo/image/upload/a.png",
        })

        assert entry.id == entry_id
        assert entry.title == "Day 1"
        assert entry.description == "First entry"
        assert entry.likes == 4
        assert entry.created_at == created_at
        assert entry.photo_url == "https://res.cloudinary.com/demo/image/upload/a.png"

    def test_accepts_string_id(self):
        """Should parse ids that come back as strings."""
        entry_id = uuid4()

        entry = row_to_entry({
            "id": str(entry_id),
            "title": "Day 1",
            "description": "First entry",
            "likes": 0,
            "created_at": datetime.now(timezone.utc),
        })

        assert entry.id == entry_id
        assert entry.photo_url is None


class TestDraftToDict:
    """Tests for draft_to_dict."""

    def test_leaves_generated_columns_out(self):
        """Should only carry the client-supplied columns."""
        data = draft_to_dict(make_draft())

        assert data == {
            "title": "Day 1",
            "description": "First entry",
            "photo_url": None,
        }

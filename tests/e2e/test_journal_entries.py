"""End-to-end tests for the journal entry endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from journal.interface.api.app import create_app
from journal.util.di.container import setup_di
from tests.conftest import PHOTO_BYTES
from tests.di import (
    FailingPersistenceProvider,
    RejectingMediaProvider,
    build_test_container,
)


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _create(client, title="Day 1", description="First entry", **kwargs):
    return client.post(
        "/journalEntries",
        data={"Title": title, "Description": description},
        **kwargs,
    )


def _client_with(**container_kwargs) -> TestClient:
    app_instance = create_app()
    setup_di(app_instance, build_test_container(**container_kwargs))
    return TestClient(app_instance)


class TestRootEndpoints:
    """Tests for GET / and GET /health."""

    def test_root_says_hello(self, client):
        """Should answer with a plain-text greeting."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "hello"
        assert response.headers["content-type"].startswith("text/plain")

    def test_health(self, client):
        """Should report healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreateEntry:
    """Tests for POST /journalEntries."""

    def test_create_without_photo(self, client):
        """Should create an entry with zero likes and no photo."""
        # Act
        response = _create(client)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"_id", "Title", "Description", "Likes", "Date", "Photo"}
        assert data["Title"] == "Day 1"
        assert data["Description"] == "First entry"
        assert data["Likes"] == 0
        assert data["Photo"] is None

    def test_create_with_photo(self, client):
        """Should upload the photo and return its URL."""
        response = _create(
            client, files={"Photo": ("day1.png", PHOTO_BYTES, "image/png")}
        )

        assert response.status_code == 201
        assert response.json()["Photo"].startswith("https://res.cloudinary.com/")

    def test_missing_title(self, client):
        """Should reject an entry without a title."""
        response = client.post("/journalEntries", data={"Description": "First entry"})

        assert response.status_code == 400
        assert response.json() == {"message": "Please Enter Title"}
        assert client.get("/journalEntries").json() == []

    def test_missing_description(self, client):
        """Should reject an entry without a description."""
        response = client.post("/journalEntries", data={"Title": "Day 1"})

        assert response.status_code == 400
        assert response.json() == {"message": "Please Enter Description"}

    def test_failed_upload_stores_nothing(self, client):
        """Should answer 500 with the upload error and store no entry."""
        response = _create(client, files={"Photo": ("empty.png", b"", "image/png")})

        assert response.status_code == 500
        assert response.json() == {"message": "Empty file"}
        assert client.get("/journalEntries").json() == []

    def test_photo_sent_as_text_field(self, client):
        """Should answer 400 with a message when Photo is not a file."""
        response = client.post(
            "/journalEntries",
            data={"Title": "Day 1", "Description": "First entry", "Photo": "xyz"},
        )

        assert response.status_code == 400
        assert set(response.json()) == {"message"}
        assert response.json()["message"]
        assert client.get("/journalEntries").json() == []

    def test_photo_required_when_configured(self, monkeypatch):
        """Should reject photo-less entries when photos are required."""
        monkeypatch.setenv("JOURNAL__REQUIRE_PHOTO", "true")
        client = _client_with()

        response = _create(client)

        assert response.status_code == 400
        assert response.json() == {"message": "No file uploaded."}


class TestListAndGetEntries:
    """Tests for GET /journalEntries and GET /journalEntries/{id}."""

    def test_empty_list(self, client):
        """Should return an empty array when there are no entries."""
        response = client.get("/journalEntries")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_in_creation_order(self, client):
        """Should list entries oldest first."""
        first = _create(client, title="Day 1").json()
        second = _create(client, title="Day 2").json()

        response = client.get("/journalEntries")

        assert [e["_id"] for e in response.json()] == [first["_id"], second["_id"]]

    def test_get_entry(self, client):
        """Should fetch a single entry."""
        created = _create(client).json()

        response = client.get(f"/journalEntries/{created['_id']}")

        assert response.status_code == 200
        assert response.json() == created


class TestLikeAndDeleteEntries:
    """Tests for PATCH /journalEntries/{id}/like and DELETE /journalEntries/{id}."""

    def test_day_one_scenario(self, client):
        """Create, like twice, delete."""
        created = _create(client).json()
        entry_id = created["_id"]

        client.patch(f"/journalEntries/{entry_id}/like")
        response = client.patch(f"/journalEntries/{entry_id}/like")
        assert response.status_code == 200
        assert response.json()["Likes"] == 2

        response = client.delete(f"/journalEntries/{entry_id}")
        assert response.status_code == 200
        assert response.json()["_id"] == entry_id
        assert response.json()["Likes"] == 2

        assert client.get("/journalEntries").json() == []

    @pytest.mark.parametrize("method,path", [
        ("GET", "/journalEntries/{id}"),
        ("PATCH", "/journalEntries/{id}/like"),
        ("DELETE", "/journalEntries/{id}"),
    ])
    def test_unknown_id(self, client, method, path):
        """Should answer 404 for an id no entry has."""
        entry_id = str(uuid4())

        response = client.request(method, path.format(id=entry_id))

        assert response.status_code == 404
        assert response.json() == {"message": f"Cannot find journal with id {entry_id}"}

    @pytest.mark.parametrize("method,path", [
        ("GET", "/journalEntries/{id}"),
        ("PATCH", "/journalEntries/{id}/like"),
        ("DELETE", "/journalEntries/{id}"),
    ])
    def test_malformed_id(self, client, method, path):
        """Should answer 404 for an id that is not a UUID."""
        response = client.request(method, path.format(id="not-an-id"))

        assert response.status_code == 404
        assert response.json() == {"message": "Cannot find journal with id not-an-id"}

    def test_delete_twice(self, client):
        """Should answer 404 the second time."""
        entry_id = _create(client).json()["_id"]

        assert client.delete(f"/journalEntries/{entry_id}").status_code == 200
        assert client.delete(f"/journalEntries/{entry_id}").status_code == 404


class TestBackendFailures:
    """Failures of the entry store and the media host."""

    def test_store_failure(self):
        """Should answer 500 with the store's message and list nothing."""
        client = _client_with(overrides=[FailingPersistenceProvider()])

        response = _create(client)

        assert response.status_code == 500
        assert response.json() == {"message": "connection refused"}
        assert client.get("/journalEntries").json() == []

    def test_media_host_rejects_upload(self):
        """Should answer 500 with the host's message and store nothing."""
        client = _client_with(overrides=[RejectingMediaProvider()])

        response = _create(
            client, files={"Photo": ("day1.png", PHOTO_BYTES, "image/png")}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Invalid image file"}
        assert client.get("/journalEntries").json() == []


class TestWithoutMediaCredentials:
    """The real Cloudinary uploader with no credentials configured."""

    @pytest.fixture
    def client(self, monkeypatch):
        for name in ("CLOUDINARY__CLOUD_NAME", "CLOUDINARY__API_KEY", "CLOUDINARY__API_SECRET"):
            monkeypatch.delenv(name, raising=False)
        return _client_with(unmock={"media"})

    def test_entries_without_photos_still_work(self, client):
        """Should list, create, like and delete without touching the host."""
        assert client.get("/journalEntries").json() == []

        created = _create(client)
        assert created.status_code == 201
        entry_id = created.json()["_id"]

        liked = client.patch(f"/journalEntries/{entry_id}/like")
        assert liked.status_code == 200
        assert liked.json()["Likes"] == 1

        assert client.delete(f"/journalEntries/{entry_id}").status_code == 200
        assert client.get("/journalEntries").json() == []

    def test_unknown_id_is_still_not_found(self, client):
        """Should answer 404, not a configuration error."""
        response = client.delete(f"/journalEntries/{uuid4()}")

        assert response.status_code == 404

    def test_photo_upload_fails(self, client):
        """Should answer 500 with a message only when a photo is sent."""
        response = _create(
            client, files={"Photo": ("day1.png", PHOTO_BYTES, "image/png")}
        )

        assert response.status_code == 500
        assert "must be configured" in response.json()["message"]
        assert client.get("/journalEntries").json() == []

"""Cloudinary media uploader.

Implements signed uploads against the Cloudinary Upload API:
https://cloudinary.com/documentation/image_upload_api_reference
"""

import hashlib
import time

import httpx
import logfire

from journal.domain.error import UploadError
from journal.domain.service.media_service import MediaUploader
from journal.domain.value import UploadResult


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute the Cloudinary request signature.

    Parameters are sorted by name, joined as ``key=value`` pairs with ``&``,
    suffixed with the API secret and hashed with SHA-1. Empty values are
    not signed.

    Args:
        params: Parameters to sign (excluding file, api_key, resource_type)
        api_secret: Cloudinary API secret

    Returns:
        Hex-encoded signature
    """
    to_sign = "&".join(
        f"{key}={value}" for key, value in sorted(params.items()) if value
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryUploader(MediaUploader):
    """Base class for Cloudinary uploaders.

    Provides type distinction for dependency injection.
    """

    pass


class RealCloudinaryUploader(CloudinaryUploader):
    """Uploads photos to Cloudinary with resource type auto-detection."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str | None = None,
        api_base_url: str = "https://api.cloudinary.com",
        timeout: float = 60.0,
    ) -> None:
        """Initialize Cloudinary uploader.

        Args:
            cloud_name: Cloudinary cloud name
            api_key: Cloudinary API key
            api_secret: Cloudinary API secret
            folder: Folder uploads are placed in (optional)
            api_base_url: Upload API base URL
            timeout: Seconds to wait for the upload round-trip

        Credentials are checked on each upload, not here.
        """
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

        # "auto" lets Cloudinary detect image/video/raw itself
        self.upload_url = f"{api_base_url.rstrip('/')}/v1_1/{cloud_name}/auto/upload"

    @property
    def is_configured(self) -> bool:
        """Whether all credentials are present."""
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def _build_form(self) -> dict[str, str]:
        """Build the signed form fields for one upload."""
        params = {"timestamp": str(int(time.time()))}
        if self.folder:
            params["folder"] = self.folder

        return {
            **params,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

    async def upload(self, data: bytes, filename: str | None = None) -> UploadResult:
        """Upload a byte buffer to Cloudinary.

        Args:
            data: Raw file bytes
            filename: Original filename, sent along for content sniffing

        Returns:
            Upload result with the secure URL

        Raises:
            UploadError: If credentials are missing, on network failure, a
                non-200 response or a malformed body
        """
        if not self.is_configured:
            logfire.error("Cloudinary upload attempted without credentials")
            raise UploadError(
                "Cloudinary cloud name, API key and API secret must be configured"
            )
        if not data:
            raise UploadError("Empty file")

        with logfire.span(
            "cloudinary.upload", size=len(data), filename=filename, folder=self.folder
        ):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self.upload_url,
                        data=self._build_form(),
                        files={"file": (filename or "upload", data)},
                        timeout=self.timeout,
                    )
            except httpx.HTTPError as e:
                logfire.error("Cloudinary upload HTTP error", error=str(e))
                raise UploadError(f"HTTP error during upload: {e}") from e

            if response.status_code != 200:
                message = _error_message(response)
                logfire.error(
                    "Cloudinary upload failed",
                    status_code=response.status_code,
                    error=message,
                )
                raise UploadError(message)

            try:
                body = response.json()
                return UploadResult(
                    url=body["secure_url"],
                    public_id=body.get("public_id"),
                    resource_type=body.get("resource_type"),
                    bytes=body.get("bytes"),
                )
            except (ValueError, KeyError, TypeError) as e:
                logfire.error("Malformed Cloudinary response", error=str(e))
                raise UploadError(f"Malformed upload response: {e}") from e


def _error_message(response: httpx.Response) -> str:
    """Extract Cloudinary's error message from a failed response."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"Upload failed: {response.status_code}"


class MockCloudinaryUploader(CloudinaryUploader):
    """Mock Cloudinary uploader for testing.

    Returns deterministic URLs derived from the content, without making
    real API calls. Set ``fail_with`` to make every upload fail.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        """Initialize mock uploader without real credentials."""
        self.fail_with = fail_with
        self.uploads: list[bytes] = []

    async def upload(self, data: bytes, filename: str | None = None) -> UploadResult:
        """Return a mock upload result.

        Raises:
            UploadError: If the buffer is empty or ``fail_with`` is set
        """
        if self.fail_with:
            raise UploadError(self.fail_with)
        if not data:
            raise UploadError("Empty file")

        self.uploads.append(data)
        digest = hashlib.sha1(data).hexdigest()[:16]
        return UploadResult(
            url=f"https://res.cloudinary.com/mock/image/upload/{digest}",
            public_id=digest,
            resource_type="image",
            bytes=len(data),
        )

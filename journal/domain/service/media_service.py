"""Media upload interface."""

from journal.domain.value import UploadResult


class MediaUploader:
    """Interface for an external binary-object host."""

    async def upload(self, data: bytes, filename: str | None = None) -> UploadResult:
        """Upload a byte buffer.

        A single round-trip with no retries. The host detects the resource
        type itself.

        Args:
            data: Raw file bytes, held in memory by the caller
            filename: Original client filename, if known

        Returns:
            Upload result carrying the durable URL

        Raises:
            UploadError: If the host rejects or fails the upload
        """
        raise NotImplementedError

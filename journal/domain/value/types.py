"""Domain value objects for the journal.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from journal.domain.value.common import ValueObject


class UploadResult(ValueObject):
    """Outcome of a successful media upload.

    ``url`` is the durable, publicly resolvable address of the stored object.
    The remaining fields are whatever the host reports about it.
    """

    url: str
    public_id: str | None = None
    resource_type: str | None = None
    bytes: int | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the URL is absolute HTTP(S)."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("Upload URL must be an absolute http(s) URL")
        return v

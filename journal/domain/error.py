"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when journal entry input is missing or blank."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested journal entry does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Cannot find {resource} with id {identifier}")


class UploadError(DomainError):
    """Raised when the media host rejects or fails an upload.

    The message is the provider's own message where one is available.
    """

    pass


class StorageError(DomainError):
    """Raised when the entry store cannot complete an operation."""

    pass

class StorageError(Exception):
    """Base exception for blob storage failures."""


class BlobNotFoundError(StorageError):
    """Raised when a blob does not exist at the requested path."""


class InvalidBlobPathError(StorageError):
    """Raised when a blob path escapes the storage root."""

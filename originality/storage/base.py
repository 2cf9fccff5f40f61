from abc import ABC, abstractmethod


class BaseBlobStorage(ABC):
    """Contract for blob storage backends."""

    @abstractmethod
    async def download(self, path: str) -> bytes:
        """Read a blob.

        Raises:
            BlobNotFoundError: if nothing is stored at ``path``.
            StorageError: on any other backend failure.
        """

    @abstractmethod
    async def upload(self, path: str, data: bytes, content_type: str) -> None:
        """Store ``data`` at ``path``, replacing any existing blob.

        Raises:
            StorageError: if the write fails.
        """

    @abstractmethod
    def signed_url(self, path: str, expires_in_seconds: int) -> str:
        """Return a download URL for ``path`` valid for ``expires_in_seconds``."""

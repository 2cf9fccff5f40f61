import asyncio

import httpx

from originality.database.models import AttachmentRecord
from originality.logging.logger import Log
from originality.processor.models import FetchedAttachment
from originality.storage.base import BaseBlobStorage
from originality.storage.exceptions import BlobNotFoundError


class AttachmentFetcher:
    """Downloads attachment bytes from their public URL or blob storage."""

    def __init__(self, storage: BaseBlobStorage, http_client: httpx.AsyncClient) -> None:
        self._storage = storage
        self._http_client = http_client

    async def fetch(self, attachment: AttachmentRecord) -> bytes:
        """Download one attachment.

        Raises:
            BlobNotFoundError: if the attachment has no location or is missing.
            httpx.HTTPError: if a public URL cannot be fetched.
        """
        if attachment.public_url:
            response = await self._http_client.get(attachment.public_url, follow_redirects=True)
            response.raise_for_status()
            return response.content
        if attachment.storage_path:
            return await self._storage.download(attachment.storage_path)
        raise BlobNotFoundError(f"Attachment {attachment.id} has no storage location")

    async def fetch_all(self, attachments: list[AttachmentRecord]) -> list[FetchedAttachment]:
        """Download all attachments concurrently, skipping the ones that fail."""
        results = await asyncio.gather(
            *(self.fetch(attachment) for attachment in attachments),
            return_exceptions=True,
        )
        fetched: list[FetchedAttachment] = []
        for attachment, result in zip(attachments, results):
            if isinstance(result, BaseException):
                Log.warning(f"Failed to download attachment {attachment.id}: {result}")
                continue
            fetched.append(FetchedAttachment(attachment=attachment, content=result))
        return fetched

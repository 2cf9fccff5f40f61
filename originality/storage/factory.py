from pathlib import Path

from originality.config.settings import Settings
from originality.storage.local_storage import LocalBlobStorage


class BlobStorageFactory:
    """Creates the configured blob storage backend."""

    @classmethod
    def create(cls, settings: Settings, storage_root: Path | None = None) -> LocalBlobStorage:
        return LocalBlobStorage(
            storage_root=storage_root if storage_root is not None else Path(settings.storage_root),
            public_base_url=settings.storage_public_base_url,
            signing_key=settings.storage_signing_key,
        )

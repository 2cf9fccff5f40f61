import asyncio
import hashlib
import hmac
import time
from pathlib import Path
from urllib.parse import quote, urlencode

from originality.logging.logger import Log
from originality.storage.base import BaseBlobStorage
from originality.storage.exceptions import BlobNotFoundError, InvalidBlobPathError, StorageError


def blob_file_path(storage_root: Path, path: str) -> Path:
    """Resolve a blob path under the storage root: {storage_root}/{path}"""
    relative = path[4:] if path.startswith("gcs/") else path
    resolved = (storage_root / relative.lstrip("/")).resolve()
    if not resolved.is_relative_to(storage_root.resolve()):
        raise InvalidBlobPathError(f"Blob path '{path}' escapes the storage root")
    return resolved


class LocalBlobStorage(BaseBlobStorage):
    """Filesystem-backed blob storage with HMAC-signed download URLs."""

    STORAGE_ROOT = Path("/app/files")

    def __init__(
        self,
        storage_root: Path | None = None,
        public_base_url: str = "http://127.0.0.1:8000",
        signing_key: str = "change-me",
    ) -> None:
        self._storage_root = storage_root if storage_root is not None else self.STORAGE_ROOT
        self._public_base_url = public_base_url.rstrip("/")
        self._signing_key = signing_key.encode()

    async def download(self, path: str) -> bytes:
        file_path = blob_file_path(self._storage_root, path)
        if not file_path.is_file():
            raise BlobNotFoundError(f"Blob not found: {path}")
        try:
            return await asyncio.to_thread(file_path.read_bytes)
        except OSError as exc:
            raise StorageError(f"Failed to read blob {path}: {exc}") from exc

    async def upload(self, path: str, data: bytes, content_type: str) -> None:
        file_path = blob_file_path(self._storage_root, path)
        try:
            await asyncio.to_thread(self._write, file_path, data)
        except OSError as exc:
            raise StorageError(f"Failed to write blob {path}: {exc}") from exc
        Log.info(f"Uploaded {len(data)} bytes to {path} ({content_type})")

    def signed_url(self, path: str, expires_in_seconds: int) -> str:
        expires = int(time.time()) + expires_in_seconds
        query = urlencode({"expires": expires, "signature": self.sign(path, expires)})
        return f"{self._public_base_url}/storage/{quote(path)}?{query}"

    def sign(self, path: str, expires: int) -> str:
        message = f"{path}:{expires}".encode()
        return hmac.new(self._signing_key, message, hashlib.sha256).hexdigest()

    def verify(self, path: str, expires: int, signature: str) -> bool:
        """Check a signature produced by signed_url and that it has not expired."""
        if expires < int(time.time()):
            return False
        return hmac.compare_digest(self.sign(path, expires), signature)

    def resolve(self, path: str) -> Path:
        return blob_file_path(self._storage_root, path)

    @staticmethod
    def _write(file_path: Path, data: bytes) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)

import time
from pathlib import Path
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest

from originality.storage.exceptions import BlobNotFoundError, InvalidBlobPathError
from originality.storage.factory import BlobStorageFactory
from originality.storage.local_storage import LocalBlobStorage, blob_file_path


class TestBlobFilePath:
    def test_resolves_under_root(self, tmp_path: Path) -> None:
        assert blob_file_path(tmp_path, "a/b.pdf") == (tmp_path / "a" / "b.pdf").resolve()

    def test_strips_legacy_bucket_prefix(self, tmp_path: Path) -> None:
        assert blob_file_path(tmp_path, "gcs/a/b.pdf") == (tmp_path / "a" / "b.pdf").resolve()

    def test_rejects_traversal(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidBlobPathError):
            blob_file_path(tmp_path, "../outside.txt")


class TestLocalBlobStorage:
    async def test_upload_then_download(self, tmp_path: Path) -> None:
        storage = LocalBlobStorage(storage_root=tmp_path)

        await storage.upload("reports/r1.zip", b"zip-bytes", "application/zip")

        assert (tmp_path / "reports" / "r1.zip").read_bytes() == b"zip-bytes"
        assert await storage.download("reports/r1.zip") == b"zip-bytes"

    async def test_download_missing_raises(self, tmp_path: Path) -> None:
        storage = LocalBlobStorage(storage_root=tmp_path)
        with pytest.raises(BlobNotFoundError):
            await storage.download("missing.pdf")

    def test_signed_url_round_trip(self, tmp_path: Path) -> None:
        storage = LocalBlobStorage(
            storage_root=tmp_path, public_base_url="https://files.example/", signing_key="k"
        )

        url = urlparse(storage.signed_url("reports/a b.zip", 60))
        params = parse_qs(url.query)

        assert url.path == "/storage/reports/a%20b.zip"
        assert storage.verify(
            "reports/a b.zip", int(params["expires"][0]), params["signature"][0]
        )

    def test_verify_rejects_tampering(self, tmp_path: Path) -> None:
        storage = LocalBlobStorage(storage_root=tmp_path, signing_key="k")
        expires = int(time.time()) + 60
        signature = storage.sign("a.zip", expires)

        assert storage.verify("a.zip", expires, signature)
        assert not storage.verify("b.zip", expires, signature)
        assert not storage.verify("a.zip", expires + 1, signature)

    def test_verify_rejects_expired(self, tmp_path: Path) -> None:
        storage = LocalBlobStorage(storage_root=tmp_path, signing_key="k")
        expires = int(time.time()) - 1
        assert not storage.verify("a.zip", expires, storage.sign("a.zip", expires))

    def test_signatures_depend_on_key(self, tmp_path: Path) -> None:
        a = LocalBlobStorage(storage_root=tmp_path, signing_key="one")
        b = LocalBlobStorage(storage_root=tmp_path, signing_key="two")
        assert a.sign("x", 1) != b.sign("x", 1)


class TestBlobStorageFactory:
    def test_uses_settings(self, tmp_path: Path) -> None:
        settings = MagicMock()
        settings.storage_root = str(tmp_path)
        settings.storage_public_base_url = "https://files.example"
        settings.storage_signing_key = "secret"

        storage = BlobStorageFactory.create(settings)

        assert storage.resolve("x.pdf") == (tmp_path / "x.pdf").resolve()
        assert storage.signed_url("x.pdf", 10).startswith("https://files.example/storage/x.pdf?")

import asyncio
import shutil
from pathlib import Path

from originality.storage.base import BaseBlobStorage


def zip_directory(folder: Path, zip_path: Path) -> Path:
    """Zip the contents of ``folder`` into ``zip_path``."""
    archive = shutil.make_archive(
        str(zip_path.with_suffix("")), "zip", root_dir=str(folder)
    )
    return Path(archive)


class ReportArchiver:
    """Packages the tool's output directory and stores it as a zip blob."""

    CONTENT_TYPE = "application/zip"

    def __init__(self, storage: BaseBlobStorage, signed_url_ttl_seconds: int) -> None:
        self._storage = storage
        self._ttl = signed_url_ttl_seconds

    @staticmethod
    def storage_path(article_id: str, report_id: str) -> str:
        return f"originality_reports/{article_id}/{report_id}.zip"

    async def archive(self, report_dir: Path, article_id: str, report_id: str) -> tuple[str, str]:
        """Upload the zipped report and return ``(storage_path, signed_url)``.

        Raises:
            StorageError: if the upload fails.
        """
        zip_path = report_dir.parent / "jplag-report.zip"
        archive = await asyncio.to_thread(zip_directory, report_dir, zip_path)
        data = await asyncio.to_thread(archive.read_bytes)
        path = self.storage_path(article_id, report_id)
        await self._storage.upload(path, data, self.CONTENT_TYPE)
        return path, self._storage.signed_url(path, self._ttl)

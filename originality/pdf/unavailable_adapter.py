from collections.abc import Iterator

from originality.logging.logger import Log
from originality.pdf.base import BasePdfExtractor


class UnavailablePdfExtractor(BasePdfExtractor):
    """Stands in when no PDF backend is configured; yields no text."""

    ENGINE = "none"

    def iter_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        Log.warning(f"No PDF backend configured, skipping {len(pdf_bytes)} bytes of PDF")
        yield from ()

import io
from collections.abc import Iterator

import pdfplumber

from originality.pdf.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    """Layout-aware page text via pdfplumber."""

    ENGINE = "pdfplumber"

    def iter_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                yield page.extract_text() or ""
                page.close()

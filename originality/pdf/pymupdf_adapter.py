from collections.abc import Iterator

import pymupdf

from originality.pdf.base import BasePdfExtractor
from originality.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Fast page text via PyMuPDF; cannot read password-protected files."""

    ENGINE = "pymupdf"

    def iter_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            if doc.needs_pass:
                raise PdfExtractionError("pymupdf cannot read an encrypted PDF")
            for page in doc:
                yield page.get_text()

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import closing

from originality.pdf.exceptions import PdfExtractionError


class BasePdfExtractor(ABC):
    """Page-by-page PDF text extraction shared by all backends.

    Backends only yield page text. Reading stops as soon as ``max_chars``
    characters are collected, so long manuscripts are not parsed in full
    when the caller truncates the text anyway.
    """

    ENGINE: str = "pdf"

    def __init__(self, max_chars: int | None = None) -> None:
        self._max_chars = max_chars

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, pages joined by newlines.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """
        pages: list[str] = []
        collected = 0
        try:
            with closing(self.iter_pages(pdf_bytes)) as page_texts:
                for text in page_texts:
                    pages.append(text)
                    collected += len(text)
                    if self._max_chars is not None and collected >= self._max_chars:
                        break
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"{self.ENGINE} extraction failed: {exc}") from exc
        return "\n".join(pages).strip()

    @abstractmethod
    def iter_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        """Yield the text of each page in reading order."""

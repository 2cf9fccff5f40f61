from originality.extraction.base import BaseFormatExtractor
from originality.pdf.base import BasePdfExtractor


class PdfFormatExtractor(BaseFormatExtractor):
    """Delegates PDF bytes to the configured PDF backend."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def extract(self, data: bytes) -> str:
        return self._pdf_extractor.extract(data)

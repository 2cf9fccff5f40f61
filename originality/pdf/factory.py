from originality.config.settings import Settings
from originality.pdf.base import BasePdfExtractor
from originality.pdf.pdfplumber_adapter import PdfPlumberAdapter
from originality.pdf.pymupdf_adapter import PyMuPdfAdapter
from originality.pdf.unavailable_adapter import UnavailablePdfExtractor


class PdfExtractorFactory:
    """Selects the PDF backend named by ``PDF_ENGINE``."""

    ENGINES: dict[str, type[BasePdfExtractor]] = {
        adapter.ENGINE: adapter
        for adapter in (PdfPlumberAdapter, PyMuPdfAdapter, UnavailablePdfExtractor)
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ENGINES)}")
        return adapter_cls(max_chars=settings.extraction_max_chars)

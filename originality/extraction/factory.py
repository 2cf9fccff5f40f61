from originality.config.settings import Settings
from originality.extraction.docx_extractor import DocxFormatExtractor
from originality.extraction.formats import FormatTag
from originality.extraction.pdf_extractor import PdfFormatExtractor
from originality.extraction.plain_text_extractor import FallbackExtractor, PlainTextExtractor
from originality.extraction.text_extractor import TextExtractor
from originality.pdf.factory import PdfExtractorFactory


class TextExtractorFactory:
    """Builds the format registry once at start-up."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        registry = {
            FormatTag.PDF: PdfFormatExtractor(PdfExtractorFactory.create(settings)),
            FormatTag.DOCX: DocxFormatExtractor(),
            FormatTag.TEXT: PlainTextExtractor(),
            FormatTag.FALLBACK: FallbackExtractor(),
        }
        return TextExtractor(registry, max_chars=settings.extraction_max_chars)

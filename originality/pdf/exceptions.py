class PdfExtractionError(Exception):
    """Raised when a PDF backend fails to parse a document."""

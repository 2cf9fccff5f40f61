from originality.extraction.base import BaseFormatExtractor


class PlainTextExtractor(BaseFormatExtractor):
    """Decodes text-like files (txt, md, html, rtf) as UTF-8."""

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")


class FallbackExtractor(BaseFormatExtractor):
    """Best-effort decode for unknown formats; binary content yields nothing."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return ""

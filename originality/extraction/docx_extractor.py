import io

import docx

from originality.extraction.base import BaseFormatExtractor


class DocxFormatExtractor(BaseFormatExtractor):
    """Extracts paragraph text from Word documents using python-docx."""

    def extract(self, data: bytes) -> str:
        document = docx.Document(io.BytesIO(data))
        paragraphs = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                paragraphs.extend(cell.text for cell in row.cells)
        return "\n".join(paragraphs)

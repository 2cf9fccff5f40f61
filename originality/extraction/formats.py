from enum import Enum
from pathlib import PurePath


class FormatTag(str, Enum):
    """Extraction variant selected from a file's extension."""

    PDF = "pdf"
    DOCX = "docx"
    TEXT = "text"
    FALLBACK = "fallback"


_EXTENSION_TAGS: dict[str, FormatTag] = {
    "pdf": FormatTag.PDF,
    "docx": FormatTag.DOCX,
    "doc": FormatTag.DOCX,
    "txt": FormatTag.TEXT,
    "text": FormatTag.TEXT,
    "md": FormatTag.TEXT,
    "html": FormatTag.TEXT,
    "htm": FormatTag.TEXT,
    "rtf": FormatTag.TEXT,
}


def format_for_filename(filename: str) -> FormatTag:
    """Map a filename to its format tag; unknown extensions fall back."""
    extension = PurePath(filename).suffix.lstrip(".").lower()
    return _EXTENSION_TAGS.get(extension, FormatTag.FALLBACK)

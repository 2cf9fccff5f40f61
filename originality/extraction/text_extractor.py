import re

from bs4 import BeautifulSoup

from originality.extraction.base import BaseFormatExtractor
from originality.extraction.formats import FormatTag, format_for_filename
from originality.logging.logger import Log

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def cap_text(text: str, max_chars: int | None) -> str:
    """Truncate ``text`` to at most ``max_chars`` characters."""
    if max_chars is not None and len(text) > max_chars:
        return text[:max_chars]
    return text


def html_to_text(markup: str, max_chars: int | None = None) -> str:
    """Reduce an HTML article body to normalized plain text, optionally capped."""
    if not markup:
        return ""
    text = normalize_whitespace(BeautifulSoup(markup, "html.parser").get_text(" "))
    return cap_text(text, max_chars)


class TextExtractor:
    """Turns attachment bytes into normalized plain text.

    Dispatch goes through a static registry keyed by FormatTag. Any failure
    for a single file is logged and degrades to an empty string so one bad
    attachment never aborts a run.
    """

    def __init__(
        self,
        registry: dict[FormatTag, BaseFormatExtractor],
        max_chars: int = 200_000,
    ) -> None:
        missing = set(FormatTag) - set(registry)
        if missing:
            raise ValueError(
                f"Extractor registry is missing formats: {sorted(t.value for t in missing)}"
            )
        self._registry = registry
        self._max_chars = max_chars

    @property
    def max_chars(self) -> int:
        return self._max_chars

    def extract(self, filename: str, data: bytes) -> str:
        tag = format_for_filename(filename)
        try:
            raw = self._registry[tag].extract(data)
        except Exception as exc:
            Log.warning(f"Text extraction failed for {filename} ({tag.value}): {exc}")
            return ""
        text = cap_text(normalize_whitespace(raw or ""), self._max_chars)
        Log.debug(f"Extracted {len(text)} chars from {filename} ({tag.value})")
        return text

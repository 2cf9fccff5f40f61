import asyncio

import httpx
from bs4 import BeautifulSoup

from originality.extraction.text_extractor import normalize_whitespace
from originality.logging.logger import Log


class PageScraper:
    """Fetches a web page and reduces it to its visible body text."""

    REMOVED_TAGS: tuple[str, ...] = ("script", "style", "nav", "header", "footer", "noscript")

    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout_seconds: float = 5.0,
        max_chars: int = 10_000,
    ) -> None:
        self._client = client
        self._timeout = timeout_seconds
        self._max_chars = max_chars

    async def scrape(self, url: str) -> str:
        """Return page text, or an empty string if the page is unavailable."""
        try:
            # httpx timeouts apply per phase; wait_for bounds the whole fetch.
            response = await asyncio.wait_for(
                self._client.get(url, timeout=self._timeout, follow_redirects=True),
                self._timeout,
            )
        except httpx.HTTPError as exc:
            Log.warning(f"Failed to scrape {url}: {exc}")
            return ""
        except asyncio.TimeoutError:
            Log.warning(f"Failed to scrape {url}: no response within {self._timeout:g}s")
            return ""
        if not response.is_success:
            Log.debug(f"Skipping {url}: HTTP {response.status_code}")
            return ""
        return self.extract_text(response.text)

    def extract_text(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(list(self.REMOVED_TAGS)):
            tag.decompose()
        root = soup.body or soup
        text = normalize_whitespace(root.get_text(" "))
        return text[: self._max_chars]

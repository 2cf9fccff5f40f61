import asyncio
from abc import ABC, abstractmethod

from duckduckgo_search import DDGS

from originality.logging.logger import Log
from originality.web.exceptions import WebSearchError


class BaseSearchClient(ABC):
    """Contract for web search providers."""

    @abstractmethod
    async def search(self, query: str, limit: int) -> list[str]:
        """Return result URLs for ``query``, at most ``limit``.

        Raises:
            WebSearchError: if the provider fails.
        """


class DuckDuckGoSearchClient(BaseSearchClient):
    """Organic web results from DuckDuckGo."""

    EXCLUDED_HOSTS: tuple[str, ...] = ("youtube.com",)

    async def search(self, query: str, limit: int) -> list[str]:
        Log.info(f"Performing web search for: {query[:80]}")
        try:
            results = await asyncio.to_thread(self._text_search, query, limit)
        except Exception as exc:
            raise WebSearchError(f"DuckDuckGo search failed: {exc}") from exc
        urls = [result.get("href", "") for result in results]
        return [
            url
            for url in urls
            if url and not any(host in url for host in self.EXCLUDED_HOSTS)
        ]

    @staticmethod
    def _text_search(query: str, limit: int) -> list[dict[str, str]]:
        with DDGS() as ddgs:
            return list(ddgs.text(query, max_results=limit) or [])


class DisabledSearchClient(BaseSearchClient):
    """Search provider used when web corroboration is switched off."""

    async def search(self, query: str, limit: int) -> list[str]:
        return []

import asyncio
import re
from typing import ClassVar

from originality.extraction.text_extractor import cap_text, normalize_whitespace
from originality.logging.logger import Log
from originality.similarity.models import Document
from originality.similarity.tfidf import compute_similarities
from originality.web.models import WebCheckConfig, WebCheckResult
from originality.web.scraper import PageScraper
from originality.web.search import BaseSearchClient


class WebCorroborator:
    """Estimates how much of a text already exists on the public web.

    Samples a few sentences as search queries, scrapes the top results and
    compares them with the text through the TF-IDF engine. Individual search
    or scrape failures only shrink the evidence; they never abort the check.
    """

    INPUT_ID: ClassVar[str] = "input-text"
    _SENTENCE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^.!?]+[.!?]+")

    def __init__(
        self,
        search_client: BaseSearchClient,
        scraper: PageScraper,
        config: WebCheckConfig | None = None,
    ) -> None:
        self._search_client = search_client
        self._scraper = scraper
        self._config = config or WebCheckConfig()

    async def check(self, text: str) -> WebCheckResult:
        if not text or len(text) < self._config.min_text_length:
            return WebCheckResult()

        clean_text = cap_text(normalize_whitespace(text), self._config.max_chars)
        urls = await self._collect_urls(self.build_queries(clean_text))
        if not urls:
            return WebCheckResult()

        pages = await self._scrape_pages(urls[: self._config.max_pages])
        if not pages:
            return WebCheckResult()

        return await self._score(clean_text, pages)

    def build_queries(self, clean_text: str) -> list[str]:
        """Pick the first, middle and near-final sentences as queries."""
        limit = self._config.query_max_chars
        sentences = self._SENTENCE_RE.findall(clean_text)
        queries: list[str] = []
        if sentences:
            queries.append(sentences[0].strip()[:limit])
        if len(sentences) > 5:
            queries.append(sentences[len(sentences) // 2].strip()[:limit])
        if len(sentences) > 10:
            queries.append(sentences[-2].strip()[:limit])
        queries = [query for query in queries if query]
        if not queries:
            queries.append(clean_text[:limit])
        return queries

    async def _collect_urls(self, queries: list[str]) -> list[str]:
        # dict keeps insertion order while de-duplicating
        urls: dict[str, None] = {}
        for query in queries:
            try:
                for url in await self._search_client.search(query, self._config.search_limit):
                    urls.setdefault(url, None)
            except Exception as exc:
                Log.warning(f"Web search failed for query '{query[:50]}': {exc}")
            await asyncio.sleep(self._config.search_delay_seconds)
        return list(urls)

    async def _scrape_pages(self, urls: list[str]) -> list[Document]:
        results = await asyncio.gather(
            *(self._scraper.scrape(url) for url in urls), return_exceptions=True
        )
        pages: list[Document] = []
        for url, result in zip(urls, results):
            if isinstance(result, BaseException):
                Log.warning(f"Failed to scrape {url}: {result}")
                continue
            if len(result) < self._config.page_min_chars:
                continue
            pages.append(Document(id=url, filename=url, text=result))
        Log.info(f"Scraped {len(pages)} usable pages out of {len(urls)} URLs")
        return pages

    async def _score(self, clean_text: str, pages: list[Document]) -> WebCheckResult:
        docs = [Document(id=self.INPUT_ID, filename="Input Text", text=clean_text), *pages]
        result = await asyncio.to_thread(compute_similarities, docs, self._config.top_terms)

        max_score = 0.0
        sources: list[str] = []
        for pair in result.pairs:
            if not pair.involves(self.INPUT_ID):
                continue
            max_score = max(max_score, pair.score)
            if pair.score > self._config.source_threshold:
                sources.append(f"{pair.other(self.INPUT_ID)} ({pair.score * 100:.0f}%)")

        final_score = min(100.0, (max_score / self._config.full_overlap_score) * 100)
        return WebCheckResult(
            score=round(final_score, 1),
            sources=sources[: self._config.max_sources],
        )

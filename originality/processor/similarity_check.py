import asyncio
import math

import httpx

from originality.config.settings import Settings
from originality.database.repositories.article_repository import ArticleRepository
from originality.extraction.factory import TextExtractorFactory
from originality.extraction.text_extractor import TextExtractor, html_to_text
from originality.logging.logger import Log
from originality.processor.attachment_fetcher import AttachmentFetcher
from originality.processor.exceptions import NothingToAnalyzeError
from originality.processor.models import SimilarityCheckOutcome
from originality.processor.steps import MAIN_CONTENT_ID
from originality.similarity.models import Document
from originality.similarity.tfidf import compute_similarities
from originality.storage.base import BaseBlobStorage
from originality.web.factory import WebCorroboratorFactory
from originality.web.scraper import PageScraper
from originality.web.search import BaseSearchClient


class SimilarityChecker:
    """Lightweight TF-IDF comparison without the external tool or a report.

    Compares the article body, its attachments and web pages found from the
    article title, then keeps pairs at or above a threshold.
    """

    QUERY_MAX_CHARS = 300

    def __init__(
        self,
        article_repo: ArticleRepository,
        fetcher: AttachmentFetcher,
        text_extractor: TextExtractor,
        search_client: BaseSearchClient,
        scraper: PageScraper,
        *,
        search_limit: int = 5,
        page_min_chars: int = 100,
        top_terms: int = 800,
        default_threshold: float = 0.6,
        default_top: int = 20,
        max_top: int = 200,
    ) -> None:
        self._article_repo = article_repo
        self._fetcher = fetcher
        self._text_extractor = text_extractor
        self._search_client = search_client
        self._scraper = scraper
        self._search_limit = search_limit
        self._page_min_chars = page_min_chars
        self._top_terms = top_terms
        self._default_threshold = default_threshold
        self._default_top = default_top
        self._max_top = max_top

    def resolve_filters(self, threshold: float | None, top: int | None) -> tuple[float, int]:
        """Apply defaults; a non-numeric threshold means no filtering."""
        if threshold is None:
            threshold = self._default_threshold
        elif math.isnan(threshold):
            threshold = 0.0
        top = self._default_top if top is None else max(1, min(self._max_top, top))
        return threshold, top

    async def run(
        self,
        article_id: str,
        threshold: float | None = None,
        top: int | None = None,
    ) -> SimilarityCheckOutcome:
        """Compare all documents of an article.

        Raises:
            ArticleNotFoundError: if the article does not exist.
            NothingToAnalyzeError: if fewer than two documents have text.
        """
        threshold, top = self.resolve_filters(threshold, top)
        article = await self._article_repo.find_by_id(article_id)
        attachments = await self._article_repo.list_attachments(article_id)
        fetched = await self._fetcher.fetch_all(attachments)

        docs: list[Document] = []
        article_text = html_to_text(article.content, self._text_extractor.max_chars)
        if article_text:
            docs.append(Document(id=MAIN_CONTENT_ID, filename="Article Content", text=article_text))
        for item in fetched:
            text = await asyncio.to_thread(
                self._text_extractor.extract, item.attachment.filename, item.content
            )
            docs.append(
                Document(id=item.attachment.id, filename=item.attachment.filename, text=text)
            )
        docs.extend(await self._web_documents(article.title or article_text[: self.QUERY_MAX_CHARS]))

        if sum(1 for doc in docs if doc.text) < 2:
            raise NothingToAnalyzeError(
                "No similar content found (fewer than two documents with text)"
            )

        result = await asyncio.to_thread(compute_similarities, docs, self._top_terms)
        pairs = [pair for pair in result.pairs if pair.score >= threshold][:top]
        Log.info(
            f"Similarity check for article {article_id}: {len(docs)} docs, "
            f"{len(pairs)} pairs >= {threshold}"
        )
        return SimilarityCheckOutcome(docs=result.docs, pairs=pairs, threshold=threshold, top=top)

    async def _web_documents(self, query: str) -> list[Document]:
        query = query.strip()
        if not query:
            return []
        try:
            urls = await self._search_client.search(query, self._search_limit)
        except Exception as exc:
            Log.warning(f"Web search failed for similarity check: {exc}")
            return []
        texts = await asyncio.gather(
            *(self._scraper.scrape(url) for url in urls), return_exceptions=True
        )
        docs: list[Document] = []
        for url, text in zip(urls, texts):
            if isinstance(text, BaseException):
                Log.warning(f"Failed to scrape {url}: {text}")
                continue
            if len(text) > self._page_min_chars:
                docs.append(Document(id=url, filename=url, text=text))
        return docs


def build_similarity_checker(
    settings: Settings,
    storage: BaseBlobStorage,
    http_client: httpx.AsyncClient,
) -> SimilarityChecker:
    """Build a SimilarityChecker with all required adapters."""
    return SimilarityChecker(
        article_repo=ArticleRepository(),
        fetcher=AttachmentFetcher(storage, http_client),
        text_extractor=TextExtractorFactory.create(settings),
        search_client=WebCorroboratorFactory.create_search_client(settings),
        scraper=PageScraper(
            http_client,
            timeout_seconds=settings.web_fetch_timeout_seconds,
            max_chars=settings.web_page_max_chars,
        ),
        search_limit=settings.web_search_limit,
        top_terms=settings.tfidf_top_terms,
        default_threshold=settings.similarity_default_threshold,
        default_top=settings.similarity_default_top,
        max_top=settings.similarity_max_top,
    )

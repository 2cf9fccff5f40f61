import httpx

from originality.config.settings import Settings
from originality.similarity.tfidf import DEFAULT_TOP_TERMS
from originality.web.corroboration import WebCorroborator
from originality.web.models import WebCheckConfig
from originality.web.scraper import PageScraper
from originality.web.search import BaseSearchClient, DisabledSearchClient, DuckDuckGoSearchClient


class WebCorroboratorFactory:
    """Creates the web corroborator with the configured search provider."""

    SEARCH_CLIENTS: dict[str, type[BaseSearchClient]] = {
        "duckduckgo": DuckDuckGoSearchClient,
        "none": DisabledSearchClient,
    }

    @classmethod
    def create(cls, settings: Settings, http_client: httpx.AsyncClient) -> WebCorroborator:
        return WebCorroborator(
            search_client=cls.create_search_client(settings),
            scraper=PageScraper(
                http_client,
                timeout_seconds=settings.web_fetch_timeout_seconds,
                max_chars=settings.web_page_max_chars,
            ),
            config=cls.create_config(settings),
        )

    @classmethod
    def create_search_client(cls, settings: Settings) -> BaseSearchClient:
        provider = settings.web_search_provider.lower()
        client_cls = cls.SEARCH_CLIENTS.get(provider)
        if client_cls is None:
            raise ValueError(
                f"Unknown web search provider '{provider}'. Choose from: {list(cls.SEARCH_CLIENTS)}"
            )
        return client_cls()

    @classmethod
    def create_config(cls, settings: Settings) -> WebCheckConfig:
        return WebCheckConfig(
            min_text_length=settings.web_min_text_length,
            query_max_chars=settings.web_query_max_chars,
            search_limit=settings.web_search_limit,
            search_delay_seconds=settings.web_search_delay_seconds,
            max_pages=settings.web_max_pages,
            page_min_chars=settings.web_page_min_chars,
            source_threshold=settings.web_source_threshold,
            max_sources=settings.web_max_sources,
            full_overlap_score=settings.web_full_overlap_score,
            top_terms=settings.tfidf_top_terms or DEFAULT_TOP_TERMS,
            max_chars=settings.extraction_max_chars,
        )

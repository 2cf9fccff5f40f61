from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from originality.similarity.tfidf import compute_similarities
from originality.web.corroboration import WebCorroborator
from originality.web.exceptions import WebSearchError
from originality.web.factory import WebCorroboratorFactory
from originality.web.models import WebCheckConfig, WebCheckResult
from originality.web.scraper import PageScraper
from originality.web.search import BaseSearchClient, DisabledSearchClient, DuckDuckGoSearchClient

ARTICLE = (
    "Glacial meltwater carries fine sediment into alpine lakes every summer. "
    "Researchers sampled twelve lakes across three valleys to measure turbidity. "
    "Sediment plumes peaked during afternoon melt pulses. "
    "Turbidity correlated strongly with upstream glacier area. "
    "Lakes fed by retreating glaciers showed the sharpest seasonal swings. "
    "These findings inform long-term monitoring of mountain water quality. "
    "Future work will extend sampling into the winter months."
)
UNRELATED_PAGE = (
    "Our bakery opens at seven with fresh sourdough, croissants and rye loaves. "
    "Order birthday cakes two days ahead and ask about gluten free options. "
) * 3


def _config(**overrides: object) -> WebCheckConfig:
    values: dict[str, object] = {"search_delay_seconds": 0.0}
    values.update(overrides)
    return WebCheckConfig(**values)  # type: ignore[arg-type]


def _search_client(urls: list[str]) -> AsyncMock:
    client = AsyncMock(spec=BaseSearchClient)
    client.search.return_value = urls
    return client


def _scraper(pages: dict[str, object]) -> AsyncMock:
    scraper = AsyncMock(spec=PageScraper)

    async def scrape(url: str) -> str:
        value = pages[url]
        if isinstance(value, Exception):
            raise value
        return value

    scraper.scrape.side_effect = scrape
    return scraper


class TestWebCorroborator:
    async def test_short_text_makes_no_network_calls(self) -> None:
        search = _search_client(["https://a.example"])
        scraper = _scraper({})
        corroborator = WebCorroborator(search, scraper, _config())

        result = await corroborator.check("Too short to search.")

        assert result == WebCheckResult()
        search.search.assert_not_called()
        scraper.scrape.assert_not_called()

    async def test_copied_page_scores_full_overlap(self) -> None:
        url = "https://journal.example/paper"
        corroborator = WebCorroborator(
            _search_client([url]), _scraper({url: ARTICLE}), _config()
        )

        result = await corroborator.check(ARTICLE)

        assert result.score == 100.0
        assert result.sources == [f"{url} (100%)"]

    async def test_unrelated_page_scores_zero(self) -> None:
        url = "https://bakery.example"
        corroborator = WebCorroborator(
            _search_client([url]), _scraper({url: UNRELATED_PAGE}), _config()
        )

        result = await corroborator.check(ARTICLE)

        assert result.score == 0.0
        assert result.sources == []

    async def test_search_failure_yields_empty_result(self) -> None:
        search = AsyncMock(spec=BaseSearchClient)
        search.search.side_effect = WebSearchError("rate limited")
        corroborator = WebCorroborator(search, _scraper({}), _config())

        result = await corroborator.check(ARTICLE)

        assert result == WebCheckResult()

    async def test_failed_and_short_pages_are_skipped(self) -> None:
        good, bad, tiny = "https://good.example", "https://bad.example", "https://tiny.example"
        scraper = _scraper({good: ARTICLE, bad: RuntimeError("boom"), tiny: "short"})
        corroborator = WebCorroborator(_search_client([bad, tiny, good]), scraper, _config())

        result = await corroborator.check(ARTICLE)

        assert result.sources == [f"{good} (100%)"]

    async def test_duplicate_urls_are_scraped_once(self) -> None:
        url = "https://journal.example/paper"
        scraper = _scraper({url: ARTICLE})
        corroborator = WebCorroborator(_search_client([url, url]), scraper, _config())

        await corroborator.check(ARTICLE)

        scraper.scrape.assert_called_once_with(url)

    async def test_pages_are_capped(self) -> None:
        urls = [f"https://site{i}.example" for i in range(8)]
        scraper = _scraper({url: UNRELATED_PAGE for url in urls})
        corroborator = WebCorroborator(_search_client(urls), scraper, _config(max_pages=3))

        await corroborator.check(ARTICLE)

        assert scraper.scrape.call_count == 3

    async def test_score_is_bounded(self) -> None:
        url = "https://journal.example/paper"
        corroborator = WebCorroborator(
            _search_client([url]),
            _scraper({url: ARTICLE}),
            _config(full_overlap_score=0.5),
        )

        result = await corroborator.check(ARTICLE)

        assert 0.0 <= result.score <= 100.0


class TestBuildQueries:
    def test_short_text_uses_first_sentence(self) -> None:
        corroborator = WebCorroborator(_search_client([]), _scraper({}), _config())
        queries = corroborator.build_queries("One sentence here. Another one.")
        assert queries == ["One sentence here."]

    def test_long_text_uses_three_sentences(self) -> None:
        text = " ".join(f"Sentence number {i} is here." for i in range(12))
        corroborator = WebCorroborator(_search_client([]), _scraper({}), _config())

        queries = corroborator.build_queries(text)

        assert queries == [
            "Sentence number 0 is here.",
            "Sentence number 6 is here.",
            "Sentence number 10 is here.",
        ]

    def test_queries_are_truncated(self) -> None:
        corroborator = WebCorroborator(
            _search_client([]), _scraper({}), _config(query_max_chars=10)
        )
        assert corroborator.build_queries("A rather long opening sentence.") == ["A rather l"]

    def test_text_without_punctuation_is_used_directly(self) -> None:
        corroborator = WebCorroborator(_search_client([]), _scraper({}), _config())
        assert corroborator.build_queries("no terminal punctuation") == ["no terminal punctuation"]


class TestDuckDuckGoSearchClient:
    async def test_filters_video_results(self, monkeypatch: pytest.MonkeyPatch) -> None:
        results = [
            {"href": "https://paper.example"},
            {"href": "https://www.youtube.com/watch?v=1"},
            {"title": "no link"},
        ]
        monkeypatch.setattr(DuckDuckGoSearchClient, "_text_search", staticmethod(lambda q, n: results))

        urls = await DuckDuckGoSearchClient().search("query", 5)

        assert urls == ["https://paper.example"]

    async def test_wraps_provider_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(query: str, limit: int) -> list[dict[str, str]]:
            raise RuntimeError("ratelimit")

        monkeypatch.setattr(DuckDuckGoSearchClient, "_text_search", staticmethod(fail))

        with pytest.raises(WebSearchError, match="ratelimit"):
            await DuckDuckGoSearchClient().search("query", 5)

    async def test_disabled_client_returns_nothing(self) -> None:
        assert await DisabledSearchClient().search("query", 5) == []


class TestWebCorroboratorFactory:
    def _settings(self, provider: str) -> MagicMock:
        settings = MagicMock()
        settings.web_search_provider = provider
        return settings

    def test_creates_duckduckgo_client(self) -> None:
        client = WebCorroboratorFactory.create_search_client(self._settings("duckduckgo"))
        assert isinstance(client, DuckDuckGoSearchClient)

    def test_creates_disabled_client(self) -> None:
        client = WebCorroboratorFactory.create_search_client(self._settings("none"))
        assert isinstance(client, DisabledSearchClient)

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown web search provider"):
            WebCorroboratorFactory.create_search_client(self._settings("bing"))


class TestInputCap:
    async def test_long_input_is_capped_before_scoring(self) -> None:
        url = "https://journal.example/paper"
        corroborator = WebCorroborator(
            _search_client([url]), _scraper({url: ARTICLE}), _config(max_chars=2_000)
        )
        spy = MagicMock(wraps=compute_similarities)

        with patch("originality.web.corroboration.compute_similarities", spy):
            await corroborator.check(ARTICLE * 100)

        docs = spy.call_args.args[0]
        assert docs[0].id == WebCorroborator.INPUT_ID
        assert len(docs[0].text) == 2_000

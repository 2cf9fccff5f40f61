import asyncio

import httpx

from originality.web.scraper import PageScraper

PAGE = """
<html>
  <head><title>Title</title><style>body { color: red; }</style></head>
  <body>
    <header>Site header</header>
    <nav>Home | About</nav>
    <article><p>Visible   article</p><p>body text.</p></article>
    <script>var tracking = true;</script>
    <footer>Copyright</footer>
  </body>
</html>
"""


def _client(handler) -> httpx.AsyncClient:  # type: ignore[no-untyped-def]
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestPageScraper:
    async def test_returns_visible_body_text(self) -> None:
        async with _client(lambda request: httpx.Response(200, text=PAGE)) as client:
            text = await PageScraper(client).scrape("https://site.example")
        assert text == "Visible article body text."

    async def test_non_success_status_yields_empty(self) -> None:
        async with _client(lambda request: httpx.Response(404, text=PAGE)) as client:
            assert await PageScraper(client).scrape("https://site.example") == ""

    async def test_transport_error_yields_empty(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            assert await PageScraper(client).scrape("https://site.example") == ""

    async def test_text_is_capped(self) -> None:
        html = "<body><p>" + "word " * 100 + "</p></body>"
        async with _client(lambda request: httpx.Response(200, text=html)) as client:
            text = await PageScraper(client, max_chars=20).scrape("https://site.example")
        assert len(text) == 20

    async def test_slow_server_is_bounded_by_total_timeout(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, text=PAGE)

        async with _client(handler) as client:
            text = await PageScraper(client, timeout_seconds=0.05).scrape("https://slow.example")
        assert text == ""

import os
import uuid
from collections.abc import AsyncGenerator, Awaitable, Callable
from importlib import resources

import pytest

from originality.config.settings import Settings
from originality.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "originality_test")
    return Settings()


@pytest.fixture
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture
async def integration_pool(test_settings: Settings) -> AsyncGenerator[None, None]:
    try:
        await init_pool(test_settings)
    except Exception as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    schema = resources.files("originality.database").joinpath("schema.sql").read_text()
    async with get_connection() as conn:
        await conn.execute(schema)
        await conn.commit()
    try:
        yield
    finally:
        await close_pool()


@pytest.fixture
async def article_ids(integration_pool: None) -> AsyncGenerator[list[str], None]:
    """Fresh article ids; their rows and reports are deleted afterwards."""
    created: list[str] = []
    yield created
    if not created:
        return
    async with get_connection() as conn:
        await conn.execute(
            "DELETE FROM originality_reports WHERE article_id = ANY(%s)", (created,)
        )
        await conn.execute("DELETE FROM articles WHERE id = ANY(%s)", (created,))
        await conn.commit()


@pytest.fixture
def insert_article(
    article_ids: list[str],
) -> Callable[..., Awaitable[str]]:
    """Factory inserting an article row and registering it for cleanup."""

    async def insert(title: str = "", content: str = "") -> str:
        article_id = f"it-{uuid.uuid4().hex[:12]}"
        async with get_connection() as conn:
            await conn.execute(
                "INSERT INTO articles (id, title, content) VALUES (%s, %s, %s)",
                (article_id, title, content),
            )
            await conn.commit()
        article_ids.append(article_id)
        return article_id

    return insert

from psycopg.rows import dict_row

from originality.database.connection import get_connection
from originality.database.models import ArticleRecord, AttachmentRecord
from originality.processor.exceptions import ArticleNotFoundError


class ArticleRepository:
    """Read-only access to the articles and attachments tables."""

    async def find_by_id(self, article_id: str) -> ArticleRecord:
        """Find an article by ID.

        Raises:
            ArticleNotFoundError: if no article with this ID exists.
        """
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    SELECT id, title, content, author_id
                    FROM articles
                    WHERE id = %s
                    """,
                    (article_id,),
                )
                row = await cur.fetchone()

        if row is None:
            raise ArticleNotFoundError(f"Article {article_id} not found")

        return ArticleRecord(
            id=str(row["id"]),
            title=row["title"] or "",
            content=row["content"] or "",
            author_id=str(row["author_id"]) if row["author_id"] is not None else None,
        )

    async def list_attachments(self, article_id: str) -> list[AttachmentRecord]:
        """Return the article's attachments, oldest first."""
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    SELECT id, article_id, filename, mime_type, storage_path, public_url
                    FROM attachments
                    WHERE article_id = %s
                    ORDER BY created_at, id
                    """,
                    (article_id,),
                )
                rows = await cur.fetchall()

        return [
            AttachmentRecord(
                id=str(row["id"]),
                article_id=str(row["article_id"]),
                filename=row["filename"] or str(row["id"]),
                mime_type=row["mime_type"] or "application/octet-stream",
                storage_path=row["storage_path"],
                public_url=row["public_url"],
            )
            for row in rows
        ]

from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from originality.database.connection import get_connection
from originality.database.models import OriginalityReport


class ReportRepository:
    """Database operations for the originality_reports table.

    Reports are insert-only: every check run creates a new row and readers
    take the newest one by ``created_at``.
    """

    async def create(self, report: OriginalityReport) -> OriginalityReport:
        """Insert a report and return it with the stored ``created_at``."""
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    INSERT INTO originality_reports
                    (id, article_id, run_by, status, similarity_summary,
                     report_storage_path, report_public_url, created_at)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, NOW())
                    RETURNING created_at
                    """,
                    (
                        report.id,
                        report.article_id,
                        report.run_by,
                        report.status,
                        Jsonb(report.similarity_summary),
                        report.report_storage_path,
                        report.report_public_url,
                    ),
                )
                row = await cur.fetchone()
            await conn.commit()

        if row is not None:
            report.created_at = row["created_at"]
        return report

    async def find_latest(self, article_id: str) -> OriginalityReport | None:
        """Return the most recent report for an article, if any."""
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    SELECT id, article_id, run_by, status, similarity_summary,
                           report_storage_path, report_public_url, created_at
                    FROM originality_reports
                    WHERE article_id = %s
                    ORDER BY created_at DESC
                    LIMIT 1
                    """,
                    (article_id,),
                )
                row = await cur.fetchone()

        if row is None:
            return None
        return self._to_report(row)

    @staticmethod
    def _to_report(row: dict[str, Any]) -> OriginalityReport:
        return OriginalityReport(
            id=str(row["id"]),
            article_id=str(row["article_id"]),
            run_by=row["run_by"],
            status=row["status"],
            similarity_summary=row["similarity_summary"] or {},
            report_storage_path=row["report_storage_path"],
            report_public_url=row["report_public_url"],
            created_at=row["created_at"],
        )

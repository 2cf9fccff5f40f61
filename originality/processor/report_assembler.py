from typing import Any

from originality.database.models import OriginalityReport
from originality.detection.models import AIDetectionResult
from originality.external.models import ExternalToolResult
from originality.web.models import WebCheckResult


class ReportAssembler:
    """Merges the three score sources into one report record."""

    STATUS_COMPLETED = "completed"

    def build_summary(
        self,
        tool_result: ExternalToolResult | None,
        ai_result: AIDetectionResult | None,
        web_result: WebCheckResult | None,
    ) -> dict[str, Any]:
        """Flat summary: tool keys (or its notice) plus AI and web scores."""
        summary: dict[str, Any] = dict(tool_result.summary) if tool_result else {}
        ai = ai_result or AIDetectionResult(score=0, details=[])
        web = web_result or WebCheckResult()
        summary["ai_score"] = ai.score
        summary["ai_details"] = list(ai.details)
        summary["web_score"] = web.score
        summary["web_sources"] = list(web.sources)
        return summary

    def assemble(
        self,
        *,
        report_id: str,
        article_id: str,
        run_by: str | None,
        tool_result: ExternalToolResult | None,
        ai_result: AIDetectionResult | None,
        web_result: WebCheckResult | None,
        report_storage_path: str | None = None,
        report_public_url: str | None = None,
    ) -> OriginalityReport:
        return OriginalityReport(
            id=report_id,
            article_id=article_id,
            run_by=run_by,
            status=self.STATUS_COMPLETED,
            similarity_summary=self.build_summary(tool_result, ai_result, web_result),
            report_storage_path=report_storage_path,
            report_public_url=report_public_url,
        )
